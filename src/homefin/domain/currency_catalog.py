"""Static currency metadata used when a currency has to be created on demand.

The catalogue is a plain mapping so callers can extend or replace it
without touching the import logic.
"""

from typing import Mapping, NamedTuple


class CurrencyInfo(NamedTuple):
    """Display metadata for a currency code."""

    name: str
    symbol: str


CURRENCY_CATALOG: Mapping[str, CurrencyInfo] = {
    "RUB": CurrencyInfo("Russian Ruble", "₽"),
    "USD": CurrencyInfo("US Dollar", "$"),
    "EUR": CurrencyInfo("Euro", "€"),
    "GBP": CurrencyInfo("British Pound", "£"),
    "JPY": CurrencyInfo("Japanese Yen", "¥"),
    "CNY": CurrencyInfo("Chinese Yuan", "¥"),
    "KRW": CurrencyInfo("South Korean Won", "₩"),
    "THB": CurrencyInfo("Thai Baht", "฿"),
    "GEL": CurrencyInfo("Georgian Lari", "₾"),
    "RSD": CurrencyInfo("Serbian Dinar", "дин"),
    "MYR": CurrencyInfo("Malaysian Ringgit", "RM"),
    "AED": CurrencyInfo("UAE Dirham", "د.إ"),
    "TRY": CurrencyInfo("Turkish Lira", "₺"),
    "PLN": CurrencyInfo("Polish Zloty", "zł"),
    "CZK": CurrencyInfo("Czech Koruna", "Kč"),
    "HUF": CurrencyInfo("Hungarian Forint", "Ft"),
    "RON": CurrencyInfo("Romanian Leu", "lei"),
    "BGN": CurrencyInfo("Bulgarian Lev", "лв"),
    "HRK": CurrencyInfo("Croatian Kuna", "kn"),
    "UAH": CurrencyInfo("Ukrainian Hryvnia", "₴"),
    "BYN": CurrencyInfo("Belarusian Ruble", "Br"),
    "KZT": CurrencyInfo("Kazakhstani Tenge", "₸"),
    "UZS": CurrencyInfo("Uzbekistani Som", "сўм"),
    "KGS": CurrencyInfo("Kyrgyzstani Som", "сом"),
    "TJS": CurrencyInfo("Tajikistani Somoni", "SM"),
    "AMD": CurrencyInfo("Armenian Dram", "֏"),
    "AZN": CurrencyInfo("Azerbaijani Manat", "₼"),
    "GMD": CurrencyInfo("Gambian Dalasi", "D"),
    "NGN": CurrencyInfo("Nigerian Naira", "₦"),
    "ZAR": CurrencyInfo("South African Rand", "R"),
    "EGP": CurrencyInfo("Egyptian Pound", "£"),
    "MAD": CurrencyInfo("Moroccan Dirham", "د.م."),
    "TND": CurrencyInfo("Tunisian Dinar", "د.ت"),
    "DZD": CurrencyInfo("Algerian Dinar", "د.ج"),
    "LYD": CurrencyInfo("Libyan Dinar", "ل.د"),
    "SDG": CurrencyInfo("Sudanese Pound", "ج.س."),
    "ETB": CurrencyInfo("Ethiopian Birr", "Br"),
    "KES": CurrencyInfo("Kenyan Shilling", "KSh"),
    "UGX": CurrencyInfo("Ugandan Shilling", "USh"),
    "TZS": CurrencyInfo("Tanzanian Shilling", "TSh"),
    "RWF": CurrencyInfo("Rwandan Franc", "RF"),
    "BIF": CurrencyInfo("Burundian Franc", "FBu"),
    "DJF": CurrencyInfo("Djiboutian Franc", "Fdj"),
    "SOS": CurrencyInfo("Somali Shilling", "S"),
    "ERN": CurrencyInfo("Eritrean Nakfa", "Nfk"),
    "SSP": CurrencyInfo("South Sudanese Pound", "£"),
    "MUR": CurrencyInfo("Mauritian Rupee", "₨"),
    "SCR": CurrencyInfo("Seychellois Rupee", "₨"),
    "KMF": CurrencyInfo("Comorian Franc", "CF"),
    "MGA": CurrencyInfo("Malagasy Ariary", "Ar"),
    "MWK": CurrencyInfo("Malawian Kwacha", "MK"),
    "ZMW": CurrencyInfo("Zambian Kwacha", "ZK"),
    "BWP": CurrencyInfo("Botswana Pula", "P"),
    "SZL": CurrencyInfo("Swazi Lilangeni", "L"),
    "LSL": CurrencyInfo("Lesotho Loti", "L"),
    "NAD": CurrencyInfo("Namibian Dollar", "N$"),
    "AOA": CurrencyInfo("Angolan Kwanza", "Kz"),
    "MZN": CurrencyInfo("Mozambican Metical", "MT"),
    "ZWL": CurrencyInfo("Zimbabwean Dollar", "Z$"),
    "SLE": CurrencyInfo("Sierra Leonean Leone", "Le"),
    "SLL": CurrencyInfo("Sierra Leonean Leone (old)", "Le"),
    "LRD": CurrencyInfo("Liberian Dollar", "L$"),
    "GHS": CurrencyInfo("Ghanaian Cedi", "₵"),
    "XOF": CurrencyInfo("West African CFA Franc", "CFA"),
    "XAF": CurrencyInfo("Central African CFA Franc", "FCFA"),
    "CDF": CurrencyInfo("Congolese Franc", "FC"),
    "CVE": CurrencyInfo("Cape Verdean Escudo", "$"),
    "STN": CurrencyInfo("São Tomé and Príncipe Dobra", "Db"),
    "GNF": CurrencyInfo("Guinean Franc", "FG"),
    "MRO": CurrencyInfo("Mauritanian Ouguiya", "UM"),
    "MRU": CurrencyInfo("Mauritanian Ouguiya (new)", "UM"),
    "XPF": CurrencyInfo("CFP Franc", "₣"),
    "TOP": CurrencyInfo("Tongan Paʻanga", "T$"),
    "WST": CurrencyInfo("Samoan Tala", "WS$"),
    "FJD": CurrencyInfo("Fijian Dollar", "FJ$"),
    "VUV": CurrencyInfo("Vanuatu Vatu", "Vt"),
    "SBD": CurrencyInfo("Solomon Islands Dollar", "SI$"),
    "PGK": CurrencyInfo("Papua New Guinean Kina", "K"),
    "AUD": CurrencyInfo("Australian Dollar", "A$"),
    "NZD": CurrencyInfo("New Zealand Dollar", "NZ$"),
    "CAD": CurrencyInfo("Canadian Dollar", "C$"),
    "MXN": CurrencyInfo("Mexican Peso", "$"),
    "GTQ": CurrencyInfo("Guatemalan Quetzal", "Q"),
    "HNL": CurrencyInfo("Honduran Lempira", "L"),
    "NIO": CurrencyInfo("Nicaraguan Córdoba", "C$"),
    "CRC": CurrencyInfo("Costa Rican Colón", "₡"),
    "PAB": CurrencyInfo("Panamanian Balboa", "B/."),
    "DOP": CurrencyInfo("Dominican Peso", "RD$"),
    "HTG": CurrencyInfo("Haitian Gourde", "G"),
    "JMD": CurrencyInfo("Jamaican Dollar", "J$"),
    "TTD": CurrencyInfo("Trinidad and Tobago Dollar", "TT$"),
    "BBD": CurrencyInfo("Barbadian Dollar", "Bds$"),
    "XCD": CurrencyInfo("East Caribbean Dollar", "EC$"),
    "AWG": CurrencyInfo("Aruban Florin", "ƒ"),
    "ANG": CurrencyInfo("Netherlands Antillean Guilder", "ƒ"),
    "SRD": CurrencyInfo("Surinamese Dollar", "$"),
    "GYD": CurrencyInfo("Guyanese Dollar", "G$"),
    "VES": CurrencyInfo("Venezuelan Bolívar", "Bs"),
    "COP": CurrencyInfo("Colombian Peso", "$"),
    "BOB": CurrencyInfo("Bolivian Boliviano", "Bs"),
    "PEN": CurrencyInfo("Peruvian Sol", "S/"),
    "CLP": CurrencyInfo("Chilean Peso", "$"),
    "ARS": CurrencyInfo("Argentine Peso", "$"),
    "UYU": CurrencyInfo("Uruguayan Peso", "$U"),
    "PYG": CurrencyInfo("Paraguayan Guarani", "₲"),
    "BRL": CurrencyInfo("Brazilian Real", "R$"),
    "FKP": CurrencyInfo("Falkland Islands Pound", "£"),
    "SHP": CurrencyInfo("Saint Helena Pound", "£"),
    "IMP": CurrencyInfo("Isle of Man Pound", "£"),
    "GGP": CurrencyInfo("Guernsey Pound", "£"),
    "JEP": CurrencyInfo("Jersey Pound", "£"),
    "GIP": CurrencyInfo("Gibraltar Pound", "£"),
    "CHF": CurrencyInfo("Swiss Franc", "CHF"),
    "SEK": CurrencyInfo("Swedish Krona", "kr"),
    "NOK": CurrencyInfo("Norwegian Krone", "kr"),
    "DKK": CurrencyInfo("Danish Krone", "kr"),
    "ISK": CurrencyInfo("Icelandic Krona", "kr"),
    "FOK": CurrencyInfo("Faroese Krona", "kr"),
    "ALL": CurrencyInfo("Albanian Lek", "L"),
    "MKD": CurrencyInfo("Macedonian Denar", "ден"),
    "BAM": CurrencyInfo("Bosnia and Herzegovina Convertible Mark", "КМ"),
    "MNT": CurrencyInfo("Mongolian Tugrik", "₮"),
    "KHR": CurrencyInfo("Cambodian Riel", "៛"),
    "LAK": CurrencyInfo("Lao Kip", "₭"),
    "VND": CurrencyInfo("Vietnamese Dong", "₫"),
    "MMK": CurrencyInfo("Myanmar Kyat", "K"),
    "BDT": CurrencyInfo("Bangladeshi Taka", "৳"),
    "LKR": CurrencyInfo("Sri Lankan Rupee", "₨"),
    "MVR": CurrencyInfo("Maldivian Rufiyaa", "Rf"),
    "PKR": CurrencyInfo("Pakistani Rupee", "₨"),
    "AFN": CurrencyInfo("Afghan Afghani", "؋"),
    "IRR": CurrencyInfo("Iranian Rial", "﷼"),
    "IQD": CurrencyInfo("Iraqi Dinar", "د.ع"),
    "JOD": CurrencyInfo("Jordanian Dinar", "د.ا"),
    "LBP": CurrencyInfo("Lebanese Pound", "ل.ل"),
    "SYP": CurrencyInfo("Syrian Pound", "£"),
    "ILS": CurrencyInfo("Israeli New Shekel", "₪"),
    "SAR": CurrencyInfo("Saudi Riyal", "﷼"),
    "QAR": CurrencyInfo("Qatari Riyal", "﷼"),
    "BHD": CurrencyInfo("Bahraini Dinar", "د.ب"),
    "KWD": CurrencyInfo("Kuwaiti Dinar", "د.ك"),
    "OMR": CurrencyInfo("Omani Rial", "﷼"),
    "YER": CurrencyInfo("Yemeni Rial", "﷼"),
    "INR": CurrencyInfo("Indian Rupee", "₹"),
    "NPR": CurrencyInfo("Nepalese Rupee", "₨"),
    "BTN": CurrencyInfo("Bhutanese Ngultrum", "Nu."),
    "MOP": CurrencyInfo("Macanese Pataca", "MOP$"),
    "HKD": CurrencyInfo("Hong Kong Dollar", "HK$"),
    "TWD": CurrencyInfo("Taiwan New Dollar", "NT$"),
    "PHP": CurrencyInfo("Philippine Peso", "₱"),
    "IDR": CurrencyInfo("Indonesian Rupiah", "Rp"),
    "SGD": CurrencyInfo("Singapore Dollar", "S$"),
    "BND": CurrencyInfo("Brunei Dollar", "B$"),
    "KID": CurrencyInfo("Kiribati Dollar", "$"),
    "TVD": CurrencyInfo("Tuvaluan Dollar", "$"),
    # Crypto
    "BTC": CurrencyInfo("Bitcoin", "₿"),
    "ETH": CurrencyInfo("Ethereum", "Ξ"),
    "USDT": CurrencyInfo("Tether USD", "₮"),
    "USDC": CurrencyInfo("USD Coin", "$"),
    "BNB": CurrencyInfo("Binance Coin", "BNB"),
    "ADA": CurrencyInfo("Cardano", "₳"),
    "SOL": CurrencyInfo("Solana", "◎"),
    "XRP": CurrencyInfo("Ripple", "XRP"),
    "DOT": CurrencyInfo("Polkadot", "●"),
    "DOGE": CurrencyInfo("Dogecoin", "Ð"),
    "AVAX": CurrencyInfo("Avalanche", "AVAX"),
    "MATIC": CurrencyInfo("Polygon", "MATIC"),
    "LINK": CurrencyInfo("Chainlink", "LINK"),
    "UNI": CurrencyInfo("Uniswap", "UNI"),
    "LTC": CurrencyInfo("Litecoin", "Ł"),
    "BCH": CurrencyInfo("Bitcoin Cash", "BCH"),
    "ATOM": CurrencyInfo("Cosmos", "ATOM"),
    "FTM": CurrencyInfo("Fantom", "FTM"),
    "NEAR": CurrencyInfo("NEAR Protocol", "NEAR"),
    "ALGO": CurrencyInfo("Algorand", "ALGO"),
    "VET": CurrencyInfo("VeChain", "VET"),
    "ICP": CurrencyInfo("Internet Computer", "ICP"),
    "FIL": CurrencyInfo("Filecoin", "FIL"),
    "TRX": CurrencyInfo("TRON", "TRX"),
    "ETC": CurrencyInfo("Ethereum Classic", "ETC"),
    "XLM": CurrencyInfo("Stellar", "XLM"),
    "HBAR": CurrencyInfo("Hedera", "HBAR"),
    "MANA": CurrencyInfo("Decentraland", "MANA"),
    "SAND": CurrencyInfo("The Sandbox", "SAND"),
    "AXS": CurrencyInfo("Axie Infinity", "AXS"),
    "CHZ": CurrencyInfo("Chiliz", "CHZ"),
    "ENJ": CurrencyInfo("Enjin Coin", "ENJ"),
    "BAT": CurrencyInfo("Basic Attention Token", "BAT"),
    "ZEC": CurrencyInfo("Zcash", "ZEC"),
    "DASH": CurrencyInfo("Dash", "DASH"),
    "XMR": CurrencyInfo("Monero", "XMR"),
    "NEO": CurrencyInfo("NEO", "NEO"),
    "QTUM": CurrencyInfo("Qtum", "QTUM"),
    "IOTA": CurrencyInfo("IOTA", "MIOTA"),
    "EOS": CurrencyInfo("EOS", "EOS"),
    "XTZ": CurrencyInfo("Tezos", "XTZ"),
    "AAVE": CurrencyInfo("Aave", "AAVE"),
    "COMP": CurrencyInfo("Compound", "COMP"),
    "MKR": CurrencyInfo("Maker", "MKR"),
    "SNX": CurrencyInfo("Synthetix", "SNX"),
    "YFI": CurrencyInfo("Yearn.finance", "YFI"),
    "SUSHI": CurrencyInfo("SushiSwap", "SUSHI"),
    "CRV": CurrencyInfo("Curve DAO Token", "CRV"),
    "1INCH": CurrencyInfo("1inch", "1INCH"),
    "GRT": CurrencyInfo("The Graph", "GRT"),
    "OCEAN": CurrencyInfo("Ocean Protocol", "OCEAN"),
    "REN": CurrencyInfo("Ren", "REN"),
    "KNC": CurrencyInfo("Kyber Network", "KNC"),
    "BAND": CurrencyInfo("Band Protocol", "BAND"),
    "UMA": CurrencyInfo("UMA", "UMA"),
    "ZRX": CurrencyInfo("0x Protocol", "ZRX"),
    "REP": CurrencyInfo("Augur", "REP"),
    "STORJ": CurrencyInfo("Storj", "STORJ"),
    "DNT": CurrencyInfo("district0x", "DNT"),
    "FUN": CurrencyInfo("FunFair", "FUN"),
    "CVC": CurrencyInfo("Civic", "CVC"),
    "GNT": CurrencyInfo("Golem", "GNT"),
    "OMG": CurrencyInfo("OMG Network", "OMG"),
    "KEEP": CurrencyInfo("Keep Network", "KEEP"),
    "NU": CurrencyInfo("NuCypher", "NU"),
    "LRC": CurrencyInfo("Loopring", "LRC"),
    "ANT": CurrencyInfo("Aragon", "ANT"),
    "MLN": CurrencyInfo("Melon", "MLN"),
    "MCO": CurrencyInfo("Crypto.com Coin", "MCO"),
    "CRO": CurrencyInfo("Crypto.com Coin", "CRO"),
    "SHIB": CurrencyInfo("Shiba Inu", "SHIB"),
    "PEPE": CurrencyInfo("Pepe", "PEPE"),
    "FLOKI": CurrencyInfo("Floki", "FLOKI"),
    "BONK": CurrencyInfo("Bonk", "BONK"),
    "WIF": CurrencyInfo("dogwifhat", "WIF"),
    "BOME": CurrencyInfo("BOOK OF MEME", "BOME"),
    "MYRO": CurrencyInfo("Myro", "MYRO"),
    "POPCAT": CurrencyInfo("Popcat", "POPCAT"),
    "MEW": CurrencyInfo("Cat in a Dogs World", "MEW"),
    "GOAT": CurrencyInfo("Goatseus Maximus", "GOAT"),
    "PNUT": CurrencyInfo("Peanut the Squirrel", "PNUT"),
}


def currency_info(code: str, catalog: Mapping[str, CurrencyInfo] = CURRENCY_CATALOG) -> CurrencyInfo:
    """Look up display metadata for a currency code.

    Unknown codes get a generic ``"<CODE> Currency"`` name with the code as
    symbol.
    """
    code = code.strip().upper()
    info = catalog.get(code)
    if info is None:
        return CurrencyInfo(f"{code} Currency", code)
    return info
