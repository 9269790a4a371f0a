BUY = [
    [
        "Consorsbank",
        "ORDERABRECHNUNG",
        "KAUF",
        "AM",
        "15.03.2021",
        "UM",
        "16:22:22",
        "WKN",
        "ISIN",
        "iShares Core MSCI World UCITS ETF",
        "A0RPWH",
        "IE00B4L5Y983",
        "Umsatz",
        "Kurs",
        "10",
        "Kurswert",
        "EUR",
        "654,30",
        "Provision",
        "4,95",
        "Betrag zu Ihren Lasten",
        "659,25",
    ]
]

SELL = [
    [
        "Consorsbank",
        "Orderabrechnung",
        "VERKAUF",
        "am 20.08.2021",
        "um",
        "11:05:00",
        "WKN",
        "ISIN",
        "Apple Inc.",
        "865985",
        "US0378331005",
        "Umsatz",
        "Kurs",
        "5",
        "Kurswert",
        "620,00",
        "Provision",
        "EUR",
        "9,95",
        "KapSt",
        "Person 1",
        "25,00 %",
        "15,00",
        "SolZ",
        "Person 1",
        "5,50 %",
        "0,82",
        "Betrag zu Ihren Gunsten",
        "594,23",
    ]
]

DIVIDEND = [
    [
        "Consorsbank",
        "DIVIDENDENGUTSCHRIFT",
        "WKN",
        "ISIN",
        "PepsiCo Inc.",
        "851995",
        "US7134481081",
        "Bestand",
        "20 Stück",
        "Devisenkurs",
        "1,1821 USD",
        "Brutto in EUR",
        "17,30 EUR",
        "Netto zugunsten",
        "IBAN",
        "DE12 5001 0517 0000 0000 00",
        "Valuta 06.01.2021",
        "14,71 EUR",
    ]
]
