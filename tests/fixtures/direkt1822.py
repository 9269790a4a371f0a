BUY_PAGE = [
    "1822direkt",
    "Wertpapier Abrechnung Kauf",
    "Nominale Wertpapierbezeichnung ISIN (WKN)",
    "Stück 4",
    "MSCI WORLD ETF",
    "(A2PKXG)",
    "Handels-/Ausführungsplatz Xetra",
    "IE00BK5BQT80",
    "Schlusstag",
    "05.01.2021",
    "Kurswert",
    "250,00",
    "Provision",
    "1,50",
    "Ausmachender Betrag",
    "251,50-",
]

DIVIDEND_PAGE = [
    "1822direkt",
    "Ausschüttung Investmentfonds",
    "Nominale Wertpapierbezeichnung ISIN (WKN)",
    "Stück 100",
    "ISHARES CORE EURO STOXX 50",
    "(A0YEDJ)",
    "Ertrag pro Stück",
    "IE00B4K48X80",
    "Zahlbarkeitstag",
    "15.03.2021",
    "Ausschüttung",
    "35,00",
    "EUR",
    "Kapitalertragsteuer",
    "6,46-",
    "Ausmachender Betrag",
    "28,54",
]

STATEMENT = [BUY_PAGE, DIVIDEND_PAGE]
