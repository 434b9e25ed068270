"""
Timezone Reference Data

Static snapshot of IANA timezone identifiers with the country each zone
belongs to and its standard UTC offset in hours (daylight saving ignored).

Entries follow the zone.tab list of canonical zones, plus the bare "UTC"
and "Etc/UTC" names and a handful of link names that are still common in
configuration files. Zones without a single national association carry an
empty country code.

Maintenance:
    This table is maintained by hand. Keep identifiers exact (case matters),
    country codes as ISO 3166-1 alpha-2, and offsets on quarter-hour steps
    within [-12, 14].

Author: Dan Parker
License: GPL v3
"""

from types import MappingProxyType

# identifier -> (country_code, standard UTC offset in hours)
_RAW_TIMEZONE_DATA = {
    # Africa
    "Africa/Abidjan": ("CI", 0),
    "Africa/Accra": ("GH", 0),
    "Africa/Addis_Ababa": ("ET", 3),
    "Africa/Algiers": ("DZ", 1),
    "Africa/Asmara": ("ER", 3),
    "Africa/Bamako": ("ML", 0),
    "Africa/Bangui": ("CF", 1),
    "Africa/Banjul": ("GM", 0),
    "Africa/Bissau": ("GW", 0),
    "Africa/Blantyre": ("MW", 2),
    "Africa/Brazzaville": ("CG", 1),
    "Africa/Bujumbura": ("BI", 2),
    "Africa/Cairo": ("EG", 2),
    "Africa/Casablanca": ("MA", 1),
    "Africa/Ceuta": ("ES", 1),
    "Africa/Conakry": ("GN", 0),
    "Africa/Dakar": ("SN", 0),
    "Africa/Dar_es_Salaam": ("TZ", 3),
    "Africa/Djibouti": ("DJ", 3),
    "Africa/Douala": ("CM", 1),
    "Africa/El_Aaiun": ("EH", 1),
    "Africa/Freetown": ("SL", 0),
    "Africa/Gaborone": ("BW", 2),
    "Africa/Harare": ("ZW", 2),
    "Africa/Johannesburg": ("ZA", 2),
    "Africa/Juba": ("SS", 2),
    "Africa/Kampala": ("UG", 3),
    "Africa/Khartoum": ("SD", 2),
    "Africa/Kigali": ("RW", 2),
    "Africa/Kinshasa": ("CD", 1),
    "Africa/Lagos": ("NG", 1),
    "Africa/Libreville": ("GA", 1),
    "Africa/Lome": ("TG", 0),
    "Africa/Luanda": ("AO", 1),
    "Africa/Lubumbashi": ("CD", 2),
    "Africa/Lusaka": ("ZM", 2),
    "Africa/Malabo": ("GQ", 1),
    "Africa/Maputo": ("MZ", 2),
    "Africa/Maseru": ("LS", 2),
    "Africa/Mbabane": ("SZ", 2),
    "Africa/Mogadishu": ("SO", 3),
    "Africa/Monrovia": ("LR", 0),
    "Africa/Nairobi": ("KE", 3),
    "Africa/Ndjamena": ("TD", 1),
    "Africa/Niamey": ("NE", 1),
    "Africa/Nouakchott": ("MR", 0),
    "Africa/Ouagadougou": ("BF", 0),
    "Africa/Porto-Novo": ("BJ", 1),
    "Africa/Sao_Tome": ("ST", 0),
    "Africa/Tripoli": ("LY", 2),
    "Africa/Tunis": ("TN", 1),
    "Africa/Windhoek": ("NA", 2),

    # North America
    "America/Adak": ("US", -10),
    "America/Anchorage": ("US", -9),
    "America/Atikokan": ("CA", -5),
    "America/Bahia_Banderas": ("MX", -6),
    "America/Belize": ("BZ", -6),
    "America/Blanc-Sablon": ("CA", -4),
    "America/Boise": ("US", -7),
    "America/Cambridge_Bay": ("CA", -7),
    "America/Cancun": ("MX", -5),
    "America/Chicago": ("US", -6),
    "America/Chihuahua": ("MX", -6),
    "America/Ciudad_Juarez": ("MX", -7),
    "America/Costa_Rica": ("CR", -6),
    "America/Creston": ("CA", -7),
    "America/Dawson": ("CA", -7),
    "America/Dawson_Creek": ("CA", -7),
    "America/Denver": ("US", -7),
    "America/Detroit": ("US", -5),
    "America/Edmonton": ("CA", -7),
    "America/El_Salvador": ("SV", -6),
    "America/Fort_Nelson": ("CA", -7),
    "America/Glace_Bay": ("CA", -4),
    "America/Goose_Bay": ("CA", -4),
    "America/Guatemala": ("GT", -6),
    "America/Halifax": ("CA", -4),
    "America/Hermosillo": ("MX", -7),
    "America/Indiana/Indianapolis": ("US", -5),
    "America/Indiana/Knox": ("US", -6),
    "America/Indiana/Marengo": ("US", -5),
    "America/Indiana/Petersburg": ("US", -5),
    "America/Indiana/Tell_City": ("US", -6),
    "America/Indiana/Vevay": ("US", -5),
    "America/Indiana/Vincennes": ("US", -5),
    "America/Indiana/Winamac": ("US", -5),
    "America/Inuvik": ("CA", -7),
    "America/Iqaluit": ("CA", -5),
    "America/Juneau": ("US", -9),
    "America/Kentucky/Louisville": ("US", -5),
    "America/Kentucky/Monticello": ("US", -5),
    "America/Los_Angeles": ("US", -8),
    "America/Managua": ("NI", -6),
    "America/Matamoros": ("MX", -6),
    "America/Mazatlan": ("MX", -7),
    "America/Menominee": ("US", -6),
    "America/Merida": ("MX", -6),
    "America/Metlakatla": ("US", -9),
    "America/Mexico_City": ("MX", -6),
    "America/Miquelon": ("PM", -3),
    "America/Moncton": ("CA", -4),
    "America/Monterrey": ("MX", -6),
    "America/New_York": ("US", -5),
    "America/Nome": ("US", -9),
    "America/North_Dakota/Beulah": ("US", -6),
    "America/North_Dakota/Center": ("US", -6),
    "America/North_Dakota/New_Salem": ("US", -6),
    "America/Ojinaga": ("MX", -6),
    "America/Panama": ("PA", -5),
    "America/Phoenix": ("US", -7),
    "America/Rankin_Inlet": ("CA", -6),
    "America/Regina": ("CA", -6),
    "America/Resolute": ("CA", -6),
    "America/Sitka": ("US", -9),
    "America/St_Johns": ("CA", -3.5),
    "America/Swift_Current": ("CA", -6),
    "America/Tegucigalpa": ("HN", -6),
    "America/Tijuana": ("MX", -8),
    "America/Toronto": ("CA", -5),
    "America/Vancouver": ("CA", -8),
    "America/Whitehorse": ("CA", -7),
    "America/Winnipeg": ("CA", -6),
    "America/Yakutat": ("US", -9),

    # Caribbean
    "America/Anguilla": ("AI", -4),
    "America/Antigua": ("AG", -4),
    "America/Aruba": ("AW", -4),
    "America/Barbados": ("BB", -4),
    "America/Cayman": ("KY", -5),
    "America/Curacao": ("CW", -4),
    "America/Dominica": ("DM", -4),
    "America/Grand_Turk": ("TC", -5),
    "America/Grenada": ("GD", -4),
    "America/Guadeloupe": ("GP", -4),
    "America/Havana": ("CU", -5),
    "America/Jamaica": ("JM", -5),
    "America/Kralendijk": ("BQ", -4),
    "America/Lower_Princes": ("SX", -4),
    "America/Marigot": ("MF", -4),
    "America/Martinique": ("MQ", -4),
    "America/Montserrat": ("MS", -4),
    "America/Nassau": ("BS", -5),
    "America/Port-au-Prince": ("HT", -5),
    "America/Port_of_Spain": ("TT", -4),
    "America/Puerto_Rico": ("PR", -4),
    "America/Santo_Domingo": ("DO", -4),
    "America/St_Barthelemy": ("BL", -4),
    "America/St_Kitts": ("KN", -4),
    "America/St_Lucia": ("LC", -4),
    "America/St_Thomas": ("VI", -4),
    "America/St_Vincent": ("VC", -4),
    "America/Tortola": ("VG", -4),

    # South America
    "America/Araguaina": ("BR", -3),
    "America/Argentina/Buenos_Aires": ("AR", -3),
    "America/Argentina/Catamarca": ("AR", -3),
    "America/Argentina/Cordoba": ("AR", -3),
    "America/Argentina/Jujuy": ("AR", -3),
    "America/Argentina/La_Rioja": ("AR", -3),
    "America/Argentina/Mendoza": ("AR", -3),
    "America/Argentina/Rio_Gallegos": ("AR", -3),
    "America/Argentina/Salta": ("AR", -3),
    "America/Argentina/San_Juan": ("AR", -3),
    "America/Argentina/San_Luis": ("AR", -3),
    "America/Argentina/Tucuman": ("AR", -3),
    "America/Argentina/Ushuaia": ("AR", -3),
    "America/Asuncion": ("PY", -3),
    "America/Bahia": ("BR", -3),
    "America/Belem": ("BR", -3),
    "America/Boa_Vista": ("BR", -4),
    "America/Bogota": ("CO", -5),
    "America/Campo_Grande": ("BR", -4),
    "America/Caracas": ("VE", -4),
    "America/Cayenne": ("GF", -3),
    "America/Cuiaba": ("BR", -4),
    "America/Eirunepe": ("BR", -5),
    "America/Fortaleza": ("BR", -3),
    "America/Guayaquil": ("EC", -5),
    "America/Guyana": ("GY", -4),
    "America/La_Paz": ("BO", -4),
    "America/Lima": ("PE", -5),
    "America/Maceio": ("BR", -3),
    "America/Manaus": ("BR", -4),
    "America/Montevideo": ("UY", -3),
    "America/Noronha": ("BR", -2),
    "America/Paramaribo": ("SR", -3),
    "America/Porto_Velho": ("BR", -4),
    "America/Punta_Arenas": ("CL", -3),
    "America/Recife": ("BR", -3),
    "America/Rio_Branco": ("BR", -5),
    "America/Santarem": ("BR", -3),
    "America/Santiago": ("CL", -4),
    "America/Sao_Paulo": ("BR", -3),

    # Greenland
    "America/Danmarkshavn": ("GL", 0),
    "America/Nuuk": ("GL", -2),
    "America/Scoresbysund": ("GL", -2),
    "America/Thule": ("GL", -4),

    # Antarctica / Arctic
    "Antarctica/Casey": ("AQ", 8),
    "Antarctica/Davis": ("AQ", 7),
    "Antarctica/DumontDUrville": ("AQ", 10),
    "Antarctica/Macquarie": ("AU", 10),
    "Antarctica/Mawson": ("AQ", 5),
    "Antarctica/McMurdo": ("AQ", 12),
    "Antarctica/Palmer": ("AQ", -3),
    "Antarctica/Rothera": ("AQ", -3),
    "Antarctica/Syowa": ("AQ", 3),
    "Antarctica/Troll": ("AQ", 0),
    "Antarctica/Vostok": ("AQ", 5),
    "Arctic/Longyearbyen": ("SJ", 1),

    # Middle East
    "Asia/Aden": ("YE", 3),
    "Asia/Amman": ("JO", 3),
    "Asia/Baghdad": ("IQ", 3),
    "Asia/Bahrain": ("BH", 3),
    "Asia/Beirut": ("LB", 2),
    "Asia/Damascus": ("SY", 3),
    "Asia/Dubai": ("AE", 4),
    "Asia/Famagusta": ("CY", 2),
    "Asia/Gaza": ("PS", 2),
    "Asia/Hebron": ("PS", 2),
    "Asia/Jerusalem": ("IL", 2),
    "Asia/Kuwait": ("KW", 3),
    "Asia/Muscat": ("OM", 4),
    "Asia/Nicosia": ("CY", 2),
    "Asia/Qatar": ("QA", 3),
    "Asia/Riyadh": ("SA", 3),
    "Asia/Tehran": ("IR", 3.5),

    # Caucasus / Central Asia
    "Asia/Almaty": ("KZ", 5),
    "Asia/Aqtau": ("KZ", 5),
    "Asia/Aqtobe": ("KZ", 5),
    "Asia/Ashgabat": ("TM", 5),
    "Asia/Atyrau": ("KZ", 5),
    "Asia/Baku": ("AZ", 4),
    "Asia/Bishkek": ("KG", 6),
    "Asia/Dushanbe": ("TJ", 5),
    "Asia/Oral": ("KZ", 5),
    "Asia/Qostanay": ("KZ", 5),
    "Asia/Qyzylorda": ("KZ", 5),
    "Asia/Samarkand": ("UZ", 5),
    "Asia/Tashkent": ("UZ", 5),
    "Asia/Tbilisi": ("GE", 4),
    "Asia/Yerevan": ("AM", 4),

    # South Asia
    "Asia/Colombo": ("LK", 5.5),
    "Asia/Dhaka": ("BD", 6),
    "Asia/Kabul": ("AF", 4.5),
    "Asia/Karachi": ("PK", 5),
    "Asia/Kathmandu": ("NP", 5.75),
    "Asia/Kolkata": ("IN", 5.5),
    "Asia/Thimphu": ("BT", 6),

    # Russia (Asian part)
    "Asia/Anadyr": ("RU", 12),
    "Asia/Barnaul": ("RU", 7),
    "Asia/Chita": ("RU", 9),
    "Asia/Irkutsk": ("RU", 8),
    "Asia/Kamchatka": ("RU", 12),
    "Asia/Khandyga": ("RU", 9),
    "Asia/Krasnoyarsk": ("RU", 7),
    "Asia/Magadan": ("RU", 11),
    "Asia/Novokuznetsk": ("RU", 7),
    "Asia/Novosibirsk": ("RU", 7),
    "Asia/Omsk": ("RU", 6),
    "Asia/Sakhalin": ("RU", 11),
    "Asia/Srednekolymsk": ("RU", 11),
    "Asia/Tomsk": ("RU", 7),
    "Asia/Ust-Nera": ("RU", 10),
    "Asia/Vladivostok": ("RU", 10),
    "Asia/Yakutsk": ("RU", 9),
    "Asia/Yekaterinburg": ("RU", 5),

    # East / Southeast Asia
    "Asia/Bangkok": ("TH", 7),
    "Asia/Brunei": ("BN", 8),
    "Asia/Dili": ("TL", 9),
    "Asia/Ho_Chi_Minh": ("VN", 7),
    "Asia/Hong_Kong": ("HK", 8),
    "Asia/Hovd": ("MN", 7),
    "Asia/Jakarta": ("ID", 7),
    "Asia/Jayapura": ("ID", 9),
    "Asia/Kuala_Lumpur": ("MY", 8),
    "Asia/Kuching": ("MY", 8),
    "Asia/Macau": ("MO", 8),
    "Asia/Makassar": ("ID", 8),
    "Asia/Manila": ("PH", 8),
    "Asia/Phnom_Penh": ("KH", 7),
    "Asia/Pontianak": ("ID", 7),
    "Asia/Pyongyang": ("KP", 9),
    "Asia/Seoul": ("KR", 9),
    "Asia/Shanghai": ("CN", 8),
    "Asia/Singapore": ("SG", 8),
    "Asia/Taipei": ("TW", 8),
    "Asia/Tokyo": ("JP", 9),
    "Asia/Ulaanbaatar": ("MN", 8),
    "Asia/Urumqi": ("CN", 6),
    "Asia/Vientiane": ("LA", 7),
    "Asia/Yangon": ("MM", 6.5),

    # Atlantic
    "Atlantic/Azores": ("PT", -1),
    "Atlantic/Bermuda": ("BM", -4),
    "Atlantic/Canary": ("ES", 0),
    "Atlantic/Cape_Verde": ("CV", -1),
    "Atlantic/Faroe": ("FO", 0),
    "Atlantic/Madeira": ("PT", 0),
    "Atlantic/Reykjavik": ("IS", 0),
    "Atlantic/South_Georgia": ("GS", -2),
    "Atlantic/St_Helena": ("SH", 0),
    "Atlantic/Stanley": ("FK", -3),

    # Australia
    "Australia/Adelaide": ("AU", 9.5),
    "Australia/Brisbane": ("AU", 10),
    "Australia/Broken_Hill": ("AU", 9.5),
    "Australia/Canberra": ("AU", 10),
    "Australia/Darwin": ("AU", 9.5),
    "Australia/Eucla": ("AU", 8.75),
    "Australia/Hobart": ("AU", 10),
    "Australia/Lindeman": ("AU", 10),
    "Australia/Lord_Howe": ("AU", 10.5),
    "Australia/Melbourne": ("AU", 10),
    "Australia/Perth": ("AU", 8),
    "Australia/Sydney": ("AU", 10),

    # Europe
    "Europe/Amsterdam": ("NL", 1),
    "Europe/Andorra": ("AD", 1),
    "Europe/Athens": ("GR", 2),
    "Europe/Belgrade": ("RS", 1),
    "Europe/Berlin": ("DE", 1),
    "Europe/Bratislava": ("SK", 1),
    "Europe/Brussels": ("BE", 1),
    "Europe/Bucharest": ("RO", 2),
    "Europe/Budapest": ("HU", 1),
    "Europe/Busingen": ("DE", 1),
    "Europe/Chisinau": ("MD", 2),
    "Europe/Copenhagen": ("DK", 1),
    "Europe/Dublin": ("IE", 0),
    "Europe/Gibraltar": ("GI", 1),
    "Europe/Guernsey": ("GG", 0),
    "Europe/Helsinki": ("FI", 2),
    "Europe/Isle_of_Man": ("IM", 0),
    "Europe/Istanbul": ("TR", 3),
    "Europe/Jersey": ("JE", 0),
    "Europe/Kiev": ("UA", 2),
    "Europe/Kyiv": ("UA", 2),
    "Europe/Lisbon": ("PT", 0),
    "Europe/Ljubljana": ("SI", 1),
    "Europe/London": ("GB", 0),
    "Europe/Luxembourg": ("LU", 1),
    "Europe/Madrid": ("ES", 1),
    "Europe/Malta": ("MT", 1),
    "Europe/Mariehamn": ("AX", 2),
    "Europe/Minsk": ("BY", 3),
    "Europe/Monaco": ("MC", 1),
    "Europe/Oslo": ("NO", 1),
    "Europe/Paris": ("FR", 1),
    "Europe/Podgorica": ("ME", 1),
    "Europe/Prague": ("CZ", 1),
    "Europe/Reykjavik": ("IS", 0),
    "Europe/Riga": ("LV", 2),
    "Europe/Rome": ("IT", 1),
    "Europe/San_Marino": ("SM", 1),
    "Europe/Sarajevo": ("BA", 1),
    "Europe/Simferopol": ("UA", 3),
    "Europe/Skopje": ("MK", 1),
    "Europe/Sofia": ("BG", 2),
    "Europe/Stockholm": ("SE", 1),
    "Europe/Tallinn": ("EE", 2),
    "Europe/Tirane": ("AL", 1),
    "Europe/Vaduz": ("LI", 1),
    "Europe/Vatican": ("VA", 1),
    "Europe/Vienna": ("AT", 1),
    "Europe/Vilnius": ("LT", 2),
    "Europe/Warsaw": ("PL", 1),
    "Europe/Zagreb": ("HR", 1),
    "Europe/Zurich": ("CH", 1),

    # Russia (European part)
    "Europe/Astrakhan": ("RU", 4),
    "Europe/Kaliningrad": ("RU", 2),
    "Europe/Kirov": ("RU", 3),
    "Europe/Moscow": ("RU", 3),
    "Europe/Samara": ("RU", 4),
    "Europe/Saratov": ("RU", 4),
    "Europe/Ulyanovsk": ("RU", 4),
    "Europe/Volgograd": ("RU", 3),

    # Indian Ocean
    "Indian/Antananarivo": ("MG", 3),
    "Indian/Chagos": ("IO", 6),
    "Indian/Christmas": ("CX", 7),
    "Indian/Cocos": ("CC", 6.5),
    "Indian/Comoro": ("KM", 3),
    "Indian/Kerguelen": ("TF", 5),
    "Indian/Mahe": ("SC", 4),
    "Indian/Maldives": ("MV", 5),
    "Indian/Mauritius": ("MU", 4),
    "Indian/Mayotte": ("YT", 3),
    "Indian/Reunion": ("RE", 4),

    # Pacific
    "Pacific/Apia": ("WS", 13),
    "Pacific/Auckland": ("NZ", 12),
    "Pacific/Bougainville": ("PG", 11),
    "Pacific/Chatham": ("NZ", 12.75),
    "Pacific/Chuuk": ("FM", 10),
    "Pacific/Easter": ("CL", -6),
    "Pacific/Efate": ("VU", 11),
    "Pacific/Fakaofo": ("TK", 13),
    "Pacific/Fiji": ("FJ", 12),
    "Pacific/Funafuti": ("TV", 12),
    "Pacific/Galapagos": ("EC", -6),
    "Pacific/Gambier": ("PF", -9),
    "Pacific/Guadalcanal": ("SB", 11),
    "Pacific/Guam": ("GU", 10),
    "Pacific/Honolulu": ("US", -10),
    "Pacific/Kanton": ("KI", 13),
    "Pacific/Kiritimati": ("KI", 14),
    "Pacific/Kosrae": ("FM", 11),
    "Pacific/Kwajalein": ("MH", 12),
    "Pacific/Majuro": ("MH", 12),
    "Pacific/Marquesas": ("PF", -9.5),
    "Pacific/Midway": ("UM", -11),
    "Pacific/Nauru": ("NR", 12),
    "Pacific/Niue": ("NU", -11),
    "Pacific/Norfolk": ("NF", 11),
    "Pacific/Noumea": ("NC", 11),
    "Pacific/Pago_Pago": ("AS", -11),
    "Pacific/Palau": ("PW", 9),
    "Pacific/Pitcairn": ("PN", -8),
    "Pacific/Pohnpei": ("FM", 11),
    "Pacific/Port_Moresby": ("PG", 10),
    "Pacific/Rarotonga": ("CK", -10),
    "Pacific/Saipan": ("MP", 10),
    "Pacific/Tahiti": ("PF", -10),
    "Pacific/Tarawa": ("KI", 12),
    "Pacific/Tongatapu": ("TO", 13),
    "Pacific/Wake": ("UM", 12),
    "Pacific/Wallis": ("WF", 12),

    # No national association
    "Etc/UTC": ("", 0),
    "UTC": ("", 0),
}

TIMEZONE_DATA = MappingProxyType({
    identifier: (country_code, float(utc_offset))
    for identifier, (country_code, utc_offset) in _RAW_TIMEZONE_DATA.items()
})
