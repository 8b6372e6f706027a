"""Merchant category definitions.

Each entry is turned into a frozen ``Category`` by ``swipewise.catalog.categories``.
Order matters: keyword ties and ``find_by_keyword`` resolve by position in this list.

- keywords: lowercase merchant-name fragments; matched case-insensitively
- aliases: alternative keys card issuers use in reward definitions
- codes: merchant category codes owned by this category (unique across the catalog)
- code_confidence: per-code confidence override; unlisted codes use the mapper default
"""

CATEGORY_DEFINITIONS: list[dict] = [
    {
        "id": "dining",
        "name": "Dining & Restaurants",
        "icon": "🍽️",
        "description": "Restaurants, cafes, bars and food delivery",
        "keywords": [
            "restaurant", "restaurants", "cafe", "coffee", "bar", "grill", "diner", "bistro",
            "pizzeria", "pizza", "steakhouse", "sushi", "taqueria", "bakery cafe",
            "doordash", "grubhub", "ubereats", "uber eats", "postmates", "seamless", "caviar",
            "chipotle", "mcdonalds", "mcdonald's", "burger king", "taco bell", "wendy's",
            "starbucks", "dunkin", "panera", "chick-fil-a", "popeyes", "subway restaurant",
            "olive garden", "cheesecake factory", "applebee's", "chili's", "shake shack",
            "outback steakhouse", "texas roadhouse", "ruth's chris", "sweetgreen",
            "takeout", "food delivery", "meal delivery", "lunch", "dinner", "breakfast", "brunch",
        ],
        "aliases": ["restaurants", "restaurant", "eating", "dining_out", "food_dining", "cafe", "coffee"],
        "codes": [5812, 5813, 5814, 5811],
        "code_confidence": {5812: 0.95, 5813: 0.93, 5814: 0.95},
        "subcategories": [
            "fine_dining", "casual_dining", "fast_casual", "fast_food", "cafe", "bar", "delivery",
        ],
        "parent": None,
    },
    {
        "id": "groceries",
        "name": "Groceries & Supermarkets",
        "icon": "🛒",
        "description": "Grocery stores, supermarkets, farmers markets and grocery delivery",
        "keywords": [
            "grocery", "groceries", "supermarket", "market", "whole foods", "trader joe's",
            "safeway", "kroger", "albertsons", "ralphs", "sprouts", "harris teeter",
            "publix", "wegmans", "aldi", "lidl", "h-e-b", "food lion", "giant eagle",
            "stop & shop", "instacart", "amazon fresh", "grocery delivery", "farmers market",
            "butcher", "produce",
        ],
        "aliases": ["grocery", "supermarket", "supermarkets", "grocery_stores", "food_grocery", "fresh"],
        "codes": [5411, 5422, 5451, 5499],
        "code_confidence": {5411: 0.92},
        "subcategories": [
            "supermarket", "natural_organic", "farmers_market", "specialty_food", "grocery_delivery",
        ],
        "parent": None,
    },
    {
        "id": "gas",
        "name": "Gas & Fuel",
        "icon": "⛽",
        "description": "Gas stations, fuel dealers and EV charging",
        "keywords": [
            "gas station", "fuel", "petrol", "gasoline", "chevron", "shell", "exxon", "mobil",
            "exxonmobil", "bp", "arco", "valero", "speedway", "sunoco", "marathon", "pilot",
            "love's", "citgo", "sinclair", "wawa", "sheetz", "quiktrip",
            "ev charging", "tesla supercharger", "electrify america", "chargepoint", "evgo",
            "charging station", "fuel pump",
        ],
        "aliases": ["fuel", "gasoline", "petrol", "gas_stations", "gas_fuel", "ev_charging"],
        "codes": [5541, 5542, 5552, 5983],
        "code_confidence": {5541: 0.95, 5542: 0.95},
        "subcategories": ["gas_station", "ev_charging", "alternative_fuel"],
        "parent": None,
    },
    {
        "id": "travel",
        "name": "Travel",
        "icon": "✈️",
        "description": "Airlines, hotels, car rentals, cruises and travel agencies",
        "keywords": [
            "airline", "airlines", "airways", "flight", "flights", "airfare", "hotel", "hotels",
            "motel", "resort", "hostel", "airbnb", "vrbo", "booking.com", "expedia", "kayak",
            "priceline", "travelocity", "orbitz", "car rental", "hertz", "avis", "enterprise rent",
            "budget rent", "sixt", "amtrak", "cruise", "delta", "united", "american airlines",
            "southwest", "jetblue", "spirit airlines", "frontier airlines", "alaska air",
            "hyatt", "marriott", "hilton", "wyndham", "ihg", "holiday inn", "travel agency",
            "vacation",
        ],
        "aliases": [
            "flights", "airline", "airlines", "airfare", "hotels", "lodging", "car_rental",
            "travel_airfare", "travel_hotel",
        ],
        "codes": [4511, 4722, 7011, 7012, 7512, 4411],
        "code_confidence": {4511: 0.95, 7011: 0.95, 7512: 0.95, 4411: 0.93},
        "subcategories": ["airfare", "hotel", "car_rental", "cruises", "tours", "rail"],
        "parent": None,
    },
    {
        "id": "entertainment",
        "name": "Entertainment",
        "icon": "🎬",
        "description": "Movies, live events, concerts, theme parks and sporting events",
        "keywords": [
            "movie", "movies", "cinema", "theater", "theatre", "amc", "regal", "cinemark",
            "concert", "festival", "ticket", "tickets", "ticketmaster", "live nation",
            "eventbrite", "vivid seats", "stubhub", "seatgeek", "comedy club", "broadway",
            "amusement park", "theme park", "disneyland", "disney world", "universal studios",
            "six flags", "bowling", "arcade", "sporting event", "museum", "zoo",
        ],
        "aliases": ["movies", "theater", "events", "concerts", "sports", "entertainment_events"],
        "codes": [7832, 7922, 7929, 7991, 7996, 7999, 7941],
        "code_confidence": {7832: 0.95, 7922: 0.93, 7996: 0.93},
        "subcategories": [
            "movies", "live_music", "theater", "comedy", "sports", "amusement_parks", "events",
        ],
        "parent": None,
    },
    {
        "id": "streaming",
        "name": "Streaming & Subscriptions",
        "icon": "🎥",
        "description": "Video and music streaming, digital media and app subscriptions",
        "keywords": [
            "netflix", "hulu", "disney+", "disney plus", "disneyplus", "apple tv", "appletv",
            "amazon prime", "prime video", "hbo max", "max.com", "paramount+", "peacock",
            "apple music", "spotify", "youtube music", "youtube premium", "youtube tv",
            "sling", "fubo", "audible", "pandora", "tidal", "siriusxm", "crunchyroll",
            "subscription", "streaming", "music streaming", "video streaming", "podcast",
        ],
        "aliases": [
            "subscriptions", "streaming_services", "digital", "digital_entertainment", "media",
        ],
        "codes": [4899, 5815, 5818],
        "code_confidence": {4899: 0.92, 5815: 0.95},
        "subcategories": [
            "video_streaming", "music_streaming", "podcast", "digital_subscriptions", "app_subscriptions",
        ],
        "parent": "entertainment",
    },
    {
        "id": "drugstores",
        "name": "Drugstores & Pharmacy",
        "icon": "💊",
        "description": "Drugstores, pharmacies and health and beauty retailers",
        "keywords": [
            "cvs", "walgreens", "rite aid", "duane reade", "pharmacy", "drugstore", "drug store",
            "vitamins", "supplements", "skincare", "ulta", "sephora", "gnc", "prescription",
        ],
        "aliases": ["pharmacy", "pharmacies", "drug_store", "drug_stores", "health_pharmacy"],
        "codes": [5912, 5122],
        "code_confidence": {5912: 0.97},
        "subcategories": ["pharmacy", "health_products", "beauty", "wellness", "personal_care"],
        "parent": None,
    },
    {
        "id": "home_improvement",
        "name": "Home Improvement",
        "icon": "🏠",
        "description": "Hardware stores, home improvement retailers and building materials",
        "keywords": [
            "home depot", "lowes", "lowe's", "home improvement", "hardware store", "hardware",
            "ace hardware", "true value", "menards", "lumber", "harbor freight", "sherwin-williams",
            "paint store", "flooring", "building materials", "nursery", "garden center",
        ],
        "aliases": ["hardware", "home_improvement_retail", "diy", "home_repair"],
        "codes": [5200, 5211, 5231, 5251, 5261],
        "code_confidence": {5200: 0.95, 5211: 0.95, 5251: 0.93},
        "subcategories": ["hardware", "paint", "tools", "flooring", "lumber", "garden"],
        "parent": None,
    },
    {
        "id": "department_stores",
        "name": "Department Stores",
        "icon": "🏬",
        "description": "Department stores, general merchandise and clothing retailers",
        "keywords": [
            "amazon", "amazon.com", "target", "macy's", "macys", "nordstrom", "kohl's", "kohls",
            "jcpenney", "dillard's", "bloomingdale's", "neiman marcus", "saks", "tj maxx",
            "marshalls", "ross stores", "walmart", "department store", "clothing", "apparel",
            "general merchandise", "shopping",
        ],
        "aliases": [
            "department_store", "shopping", "retail", "retail_stores", "general_merchandise",
            "online_shopping",
        ],
        "codes": [5311, 5331, 5399, 5651],
        "code_confidence": {5311: 0.95},
        "subcategories": [
            "online_shopping", "clothing", "general_retail", "department_stores", "discount_stores",
        ],
        "parent": None,
    },
    {
        "id": "transit",
        "name": "Transit & Rideshare",
        "icon": "🚌",
        "description": "Public transportation, rideshare, taxis, tolls and parking",
        "keywords": [
            "uber", "lyft", "metro", "subway", "bus", "mta", "bart", "caltrain", "septa",
            "greyhound", "megabus", "taxi", "cab", "light rail", "ferry", "toll", "ez-pass",
            "e-zpass", "parking", "rideshare", "commuter", "public transportation",
        ],
        "aliases": [
            "rideshare", "ride_share", "transportation", "public_transit", "commute", "taxi",
        ],
        "codes": [4111, 4121, 4131, 4789],
        "code_confidence": {4111: 0.95, 4121: 0.95, 4131: 0.93},
        "subcategories": ["public_transit", "rideshare", "taxi", "train", "bus", "tolls", "parking"],
        "parent": None,
    },
    {
        "id": "utilities",
        "name": "Utilities",
        "icon": "📡",
        "description": "Phone, internet, cable, electric, water and gas bills",
        "keywords": [
            "verizon", "at&t", "t-mobile", "comcast", "xfinity", "spectrum", "cox communications",
            "optimum", "phone bill", "internet bill", "cable bill", "wireless", "broadband",
            "electric company", "electricity", "power company", "water bill", "water utility",
            "gas bill", "gas company", "utility", "telecom",
        ],
        "aliases": ["phone", "internet", "cable", "telecom", "wireless", "electricity"],
        "codes": [4814, 4900, 4816],
        "code_confidence": {4814: 0.95, 4900: 0.95},
        "subcategories": ["phone", "internet", "cable", "electricity", "water", "gas", "telecom"],
        "parent": None,
    },
    {
        "id": "warehouse",
        "name": "Warehouse Clubs",
        "icon": "📦",
        "description": "Warehouse membership clubs and bulk retailers",
        "keywords": [
            "costco", "sam's club", "sams club", "bj's wholesale", "bjs wholesale",
            "warehouse club", "wholesale club", "wholesale", "membership club", "bulk",
        ],
        "aliases": ["warehouse_clubs", "wholesale_clubs", "costco", "sams_club", "wholesale"],
        "codes": [5300],
        "code_confidence": {5300: 0.97},
        "subcategories": ["warehouse_clubs", "bulk_shopping", "membership_clubs"],
        "parent": None,
    },
    {
        "id": "office_supplies",
        "name": "Office Supplies",
        "icon": "🖊️",
        "description": "Office supply stores, stationery and business equipment",
        "keywords": [
            "staples", "office depot", "officemax", "office max", "office supplies",
            "office supply", "business supplies", "stationery", "printer ink", "toner",
        ],
        "aliases": ["office_supply", "business_supplies", "stationery", "supplies"],
        "codes": [5943, 5111, 5044],
        "code_confidence": {5943: 0.93},
        "subcategories": ["office_supplies", "printing", "business_equipment", "stationery"],
        "parent": None,
    },
    {
        "id": "insurance",
        "name": "Insurance",
        "icon": "🛡️",
        "description": "Auto, home, health and life insurance premiums",
        "keywords": [
            "insurance", "insurance premium", "auto insurance", "car insurance", "home insurance",
            "renters insurance", "health insurance", "life insurance", "geico", "state farm",
            "progressive", "allstate", "liberty mutual", "nationwide", "farmers insurance",
            "usaa", "lemonade",
        ],
        "aliases": ["insurance_services", "auto_insurance", "home_insurance", "coverage"],
        "codes": [6300, 5960],
        "code_confidence": {6300: 0.97},
        "subcategories": [
            "auto_insurance", "home_insurance", "health_insurance", "life_insurance", "other_insurance",
        ],
        "parent": None,
    },
]
