"""
Category rule tables for spending categorization.
Each table maps a rule key (lowercase category) to keywords and regex patterns.

Declaration order matters: the classifier returns the first category whose
keywords or patterns match, so earlier entries win ties.
"""

# Consumer brands seen in SMS/UPI notifications (merchant names)
SMS_CATEGORY_PATTERNS = {
    "food": {
        "keywords": [
            "zomato", "swiggy", "mcdonald", "kfc", "domino", "pizza",
            "restaurant", "cafe", "starbucks"
        ],
        "regex_patterns": [],
        "description": "Food delivery & dining"
    },

    "shopping": {
        "keywords": [
            "amazon", "flipkart", "myntra", "ajio", "store", "mall", "shop"
        ],
        "regex_patterns": [],
        "description": "Online & retail shopping"
    },

    "travel": {
        "keywords": [
            "uber", "ola", "rapido", "irctc", "makemytrip", "goibibo",
            "flight", "hotel"
        ],
        "regex_patterns": [],
        "description": "Cabs, trains, flights & hotels"
    },

    "entertainment": {
        "keywords": [
            "bookmyshow", "netflix", "spotify", "prime", "hotstar", "movie"
        ],
        "regex_patterns": [],
        "description": "Streaming, movies & events"
    },

    "bills": {
        "keywords": [
            "electricity", "water", "gas", "internet", "airtel", "jio",
            "vodafone"
        ],
        "regex_patterns": [],
        "description": "Utilities & telecom"
    },

    "groceries": {
        "keywords": [
            "bigbasket", "grofers", "blinkit", "dunzo", "supermarket"
        ],
        "regex_patterns": [],
        "description": "Grocery delivery & supermarkets"
    },

    "healthcare": {
        "keywords": [
            "pharmacy", "apollo", "hospital", "clinic", "doctor"
        ],
        "regex_patterns": [],
        "description": "Pharmacies, hospitals & clinics"
    },

    "transport": {
        "keywords": [
            "petrol", "fuel", "parking"
        ],
        "regex_patterns": [],
        "description": "Fuel & parking"
    },
}


# Business-type descriptors printed at the top of receipts
RECEIPT_CATEGORY_PATTERNS = {
    "food": {
        "keywords": [
            "restaurant", "cafe", "hotel", "bistro", "kitchen", "pizza",
            "burger", "food"
        ],
        "regex_patterns": [],
        "description": "Restaurants & cafes"
    },

    "groceries": {
        "keywords": [
            "supermarket", "mart", "grocery", "store", "fresh", "bazaar"
        ],
        "regex_patterns": [],
        "description": "Supermarkets & grocery stores"
    },

    "shopping": {
        "keywords": [
            "fashion", "mall", "boutique", "store", "shop", "retail"
        ],
        "regex_patterns": [],
        "description": "Retail & fashion"
    },

    "healthcare": {
        "keywords": [
            "pharmacy", "medical", "hospital", "clinic", "health", "care"
        ],
        "regex_patterns": [],
        "description": "Pharmacies & medical"
    },

    "entertainment": {
        "keywords": [
            "cinema", "theatre", "multiplex", "pvr", "inox"
        ],
        "regex_patterns": [],
        "description": "Cinemas & theatres"
    },

    "transport": {
        "keywords": [
            "petrol", "fuel", "gas", "station"
        ],
        "regex_patterns": [],
        "description": "Fuel stations"
    },

    "bills": {
        "keywords": [
            "electricity", "water", "utility"
        ],
        "regex_patterns": [],
        "description": "Utility counters"
    },
}


# General table for titles typed by hand and standalone categorization
GENERAL_CATEGORY_PATTERNS = {
    "food": {
        "keywords": [
            "zomato", "swiggy", "uber eats", "foodpanda",
            "mcdonald", "kfc", "domino", "pizza", "burger",
            "restaurant", "cafe", "starbucks", "dunkin",
            "food", "dining", "lunch", "dinner", "breakfast"
        ],
        "regex_patterns": [
            r"(?i)restaurant",
            r"(?i)cafe",
            r"(?i)food",
            r"(?i)dining",
        ],
        "description": "Food & Dining"
    },

    "shopping": {
        "keywords": [
            "amazon", "flipkart", "myntra", "ajio", "meesho",
            "nykaa", "tata cliq", "shopping", "store", "mall",
            "fashion", "clothes", "apparel"
        ],
        "regex_patterns": [
            r"(?i)shop",
            r"(?i)store",
            r"(?i)mall",
            r"(?i)retail",
        ],
        "description": "Shopping"
    },

    "travel": {
        "keywords": [
            "uber", "ola", "rapido", "airline", "flight",
            "hotel", "booking", "makemytrip", "goibibo",
            "cleartrip", "irctc", "train", "bus", "taxi"
        ],
        "regex_patterns": [
            r"(?i)travel",
            r"(?i)transport",
            r"(?i)taxi",
            r"(?i)flight",
            r"(?i)hotel",
        ],
        "description": "Travel"
    },

    "entertainment": {
        "keywords": [
            "netflix", "amazon prime", "hotstar", "spotify",
            "youtube", "bookmyshow", "pvr", "inox", "cinema",
            "movie", "theatre", "game", "entertainment"
        ],
        "regex_patterns": [
            r"(?i)entertainment",
            r"(?i)movie",
            r"(?i)cinema",
            r"(?i)game",
        ],
        "description": "Entertainment"
    },

    "bills": {
        "keywords": [
            "electricity", "water", "gas", "internet", "broadband",
            "phone", "mobile", "airtel", "jio", "vodafone",
            "bill", "utility", "recharge"
        ],
        "regex_patterns": [
            r"(?i)bill",
            r"(?i)utility",
            r"(?i)electricity",
            r"(?i)recharge",
        ],
        "description": "Bills & Utilities"
    },

    "groceries": {
        "keywords": [
            "bigbasket", "grofers", "blinkit", "dunzo", "zepto",
            "supermarket", "grocery", "vegetables", "fruits",
            "provisions", "kirana"
        ],
        "regex_patterns": [
            r"(?i)grocery",
            r"(?i)supermarket",
            r"(?i)mart",
        ],
        "description": "Groceries"
    },

    "healthcare": {
        "keywords": [
            "pharmacy", "medical", "hospital", "clinic", "doctor",
            "apollo", "health", "medicine", "drug", "wellness"
        ],
        "regex_patterns": [
            r"(?i)health",
            r"(?i)medical",
            r"(?i)pharmacy",
            r"(?i)hospital",
            r"(?i)clinic",
        ],
        "description": "Healthcare"
    },

    "transport": {
        "keywords": [
            "petrol", "diesel", "fuel", "gas", "station",
            "parking", "toll", "fastag"
        ],
        "regex_patterns": [
            r"(?i)petrol",
            r"(?i)fuel",
            r"(?i)parking",
        ],
        "description": "Fuel, Parking & Tolls"
    },

    "education": {
        "keywords": [
            "school", "college", "university", "course", "class",
            "tuition", "coaching", "udemy", "coursera", "book"
        ],
        "regex_patterns": [
            r"(?i)education",
            r"(?i)course",
            r"(?i)book",
        ],
        "description": "Education"
    },
}
