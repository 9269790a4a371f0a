BUY = [
    [
        "ING-DiBa AG · 60628 Frankfurt am Main",
        "Wertpapierabrechnung Kauf",
        "ISIN (WKN)",
        "DE0005190003 (519000)",
        "Wertpapierbezeichnung",
        "BMW AG - Stammaktien",
        "Nominale",
        "Stück",
        "7",
        "Ausführungstag",
        "Ausführungszeit",
        "23.11.2020",
        "09:04:42",
        "Kurs",
        "EUR",
        "72,40",
        "Kurswert",
        "EUR",
        "506,80",
        "Provision",
        "EUR",
        "9,90",
        "Endbetrag zu Ihren Lasten",
        "EUR",
        "516,70",
        "BIC: INGDDEFFXX",
    ]
]

DIVIDEND = [
    [
        "ING-DiBa AG · 60628 Frankfurt am Main",
        "Dividendengutschrift",
        "ISIN (WKN)",
        "US7427181091 (852062)",
        "Wertpapierbezeichnung",
        "Procter & Gamble Co., The - Registered Shares o.N.",
        "Nominale",
        "50 Stück",
        "Zahltag",
        "15.05.2020",
        "Brutto",
        "EUR",
        "100,00",
        "Kapitalertragsteuer 25,00 %",
        "EUR",
        "15,00",
        "Gesamtbetrag zu Ihren Gunsten",
        "EUR",
        "85,00",
        "BIC: INGDDEFFXX",
    ]
]
