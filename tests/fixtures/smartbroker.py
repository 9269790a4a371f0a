SELL = [
    [
        "Landsberger Straße 300",
        "BNP Paribas S.A. Niederlassung Deutschland",
        "BELEGDRUCK=J",
        "Wir haben für Sie verkauft",
        "Amazon.com Inc. Registered Shares DL -,01",
        "ISIN",
        "US0231351067",
        "STK 1,000",
        "Handelstag",
        "02.11.2020",
        "Kurswert",
        "EUR",
        "2.700,00",
        "Betrag zu Ihren Gunsten",
        "04.11.2020",
        "EUR",
        "2.695,00",
        "Kapitalertragsteuer",
        "EUR",
        "50,00",
        "Solidaritätszuschlag",
        "EUR",
        "2,75",
    ]
]

DIVIDEND = [
    [
        "Landsberger Straße 300",
        "BNP Paribas S.A. Niederlassung Deutschland",
        "BELEGDRUCK=J",
        "Dividendengutschrift",
        "Coca-Cola Co., The Registered Shares DL -,25",
        "ISIN",
        "US1912161007",
        "STK 30,000",
        "Zahltag",
        "01.04.2021",
        "ausländische Dividende",
        "EUR",
        "10,50",
        "Kapitalertragsteuer",
        "EUR",
        "1,05",
        "Solidaritätszuschlag",
        "EUR",
        "0,05",
        "Kirchensteuer",
        "EUR",
        "0,08",
    ]
]

# Shares the onvista marker and the smartbroker address, without the bank line
# that separates the two.
OVERLAPPING = [
    [
        "Landsberger Straße 300",
        "BELEGDRUCK=J",
        "Wir haben für Sie gekauft",
    ]
]
