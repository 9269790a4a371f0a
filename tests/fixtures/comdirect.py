BUY = [
    [
        "comdirect bank",
        "Wertpapierkauf",
        "Geschäftsnummer : 72 4000 8542 1234",
        "Wertpapier-Bezeichnung WPKNR/ISIN",
        "Vanguard FTSE All-World U.ETF A1JX52",
        "IE00B3RBWM25",
        "Nennwert Zum Kurs von",
        "St. 10 EUR 78,9900",
        "Kurswert : EUR 789,90",
        "Provision : EUR 4,90",
        "Valuta Zu Ihren Lasten vor Steuern",
        "04.06.2020 EUR 794,80",
    ]
]

BUY_WITH_REDUCTION = [
    [
        "comdirect bank",
        "Wertpapierkauf",
        "Wertpapier-Bezeichnung WPKNR/ISIN",
        "Vanguard FTSE All-World U.ETF A1JX52",
        "IE00B3RBWM25",
        "Nennwert Zum Kurs von",
        "St. 10 EUR 78,9900",
        "Kurswert : EUR 789,90",
        "Provision : EUR 4,90",
        "Reduktion Kaufaufschlag EUR 1,50-",
        "Valuta Zu Ihren Lasten vor Steuern",
        "04.06.2020 EUR 793,30",
    ]
]

SELL = [
    [
        "comdirect bank",
        "Wertpapierverkauf",
        "Wertpapier-Bezeichnung WPKNR/ISIN",
        "Deutsche Telekom AG Namens-Aktien o.N. 555750",
        "DE0005557508",
        "Nennwert Zum Kurs von",
        "St. 50 EUR 16,50",
        "Kurswert : EUR 825,00",
        "Valuta Zu Ihren Gunsten vor Steuern",
        "10.09.2020 EUR 815,10",
    ]
]

DIVIDEND = [
    [
        "comdirect bank",
        "Dividendengutschrift",
        "Wertpapier-Bezeichnung WPKNR/ISIN",
        "Bestandsstichtag 08.05.2020",
        "Apple Inc. Registered Shares o.N.",
        "US0378331005",
        "STK 25 zahlbar ab 14.05.2020",
        "Zu Ihren Gunsten vor Steuern",
        "EUR 17,75",
    ]
]
