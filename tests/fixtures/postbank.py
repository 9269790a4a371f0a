BUY = [
    [
        "Postbank",
        "BIC PBNKDEFFXXX",
        "Wertpapier Abrechnung Kauf",
        "Nominale Wertpapierbezeichnung ISIN (WKN)",
        "Stück 15",
        "ISHARES CORE DAX UCITS ETF",
        "INHABER-ANTEILE",
        "DE0005933931",
        "Schlusstag/-Zeit",
        "02.02.2021 09:15:01 Auftraggeber Erika Mustermann",
        "Ausführungskurs",
        "120,00 EUR",
        "Kurswert",
        "1.800,00 EUR",
        "Provision",
        "9,95 EUR",
        "Ausmachender Betrag",
        "1.809,95- EUR",
    ]
]

DIVIDEND = [
    [
        "Postbank",
        "BIC PBNKDEFFXXX",
        "Dividendengutschrift",
        "Nominale Wertpapierbezeichnung ISIN (WKN)",
        "Stück 80",
        "ALLIANZ SE",
        "VINK. NAMENS-AKTIEN O.N.",
        "DE0008404005",
        "Zahlbarkeitstag",
        "10.05.2021 Dividende pro Stück 9,60 EUR",
        "Ausmachender Betrag",
        "768,00 EUR",
    ]
]
