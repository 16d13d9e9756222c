# camino/api/data/phrasebook.py
"""Bilingual phrase tables for pilgrims, keyed by (source, target) code.

Only the English -> X tables are written out; X -> English tables are
derived by inverting them. Keys may contain punctuation and capitals, they
are normalized when the tables are loaded.
"""

EN_ES = {
    # greetings and courtesy
    "hello": "hola",
    "hi": "hola",
    "goodbye": "adiós",
    "good morning": "buenos días",
    "good afternoon": "buenas tardes",
    "good evening": "buenas tardes",
    "good night": "buenas noches",
    "please": "por favor",
    "thank you": "gracias",
    "thank you very much": "muchas gracias",
    "thanks": "gracias",
    "you're welcome": "de nada",
    "excuse me": "perdón",
    "sorry": "lo siento",
    "yes": "sí",
    "no": "no",
    "nice to meet you": "mucho gusto",
    "how are you": "¿cómo está?",
    "i'm fine": "estoy bien",
    "see you later": "hasta luego",
    "good way": "buen camino",
    "buen camino": "buen camino",
    "do you speak english": "¿habla inglés?",
    "i don't understand": "no entiendo",
    "i don't speak spanish": "no hablo español",
    "can you help me": "¿puede ayudarme?",
    "speak more slowly please": "hable más despacio, por favor",
    # on the way
    "where is the bathroom": "¿dónde está el baño?",
    "where is the albergue": "¿dónde está el albergue?",
    "where is the camino": "¿dónde está el camino?",
    "how far is it": "¿a qué distancia está?",
    "how far is the next town": "¿a qué distancia está el próximo pueblo?",
    "i am a pilgrim": "soy peregrino",
    "i am lost": "estoy perdido",
    "is this the way to santiago": "¿es este el camino a santiago?",
    "turn left": "gire a la izquierda",
    "turn right": "gire a la derecha",
    "go straight": "siga recto",
    "the yellow arrow": "la flecha amarilla",
    "the pilgrim credential": "la credencial del peregrino",
    "a stamp please": "un sello, por favor",
    # lodging
    "do you have a bed": "¿tiene una cama?",
    "i have a reservation": "tengo una reserva",
    "a room for one night": "una habitación para una noche",
    "what time is breakfast": "¿a qué hora es el desayuno?",
    "what time is check out": "¿a qué hora hay que dejar la habitación?",
    "the key please": "la llave, por favor",
    # food and shopping
    "the menu please": "la carta, por favor",
    "the pilgrim menu": "el menú del peregrino",
    "the bill please": "la cuenta, por favor",
    "how much does it cost": "¿cuánto cuesta?",
    "how much is it": "¿cuánto es?",
    "a glass of red wine": "una copa de vino tinto",
    "a coffee with milk": "un café con leche",
    "i am vegetarian": "soy vegetariano",
    "i am allergic": "soy alérgico",
    "tap water": "agua del grifo",
    # health
    "i need a doctor": "necesito un médico",
    "i have blisters": "tengo ampollas",
    "my feet hurt": "me duelen los pies",
    "where is the pharmacy": "¿dónde está la farmacia?",
    "call an ambulance": "llame a una ambulancia",
    # words
    "the": "el",
    "a": "un",
    "and": "y",
    "or": "o",
    "with": "con",
    "without": "sin",
    "where": "dónde",
    "when": "cuándo",
    "what": "qué",
    "how": "cómo",
    "is": "es",
    "today": "hoy",
    "tomorrow": "mañana",
    "yesterday": "ayer",
    "now": "ahora",
    "here": "aquí",
    "there": "allí",
    "left": "izquierda",
    "right": "derecha",
    "near": "cerca",
    "far": "lejos",
    "open": "abierto",
    "closed": "cerrado",
    "water": "agua",
    "bread": "pan",
    "wine": "vino",
    "beer": "cerveza",
    "coffee": "café",
    "milk": "leche",
    "food": "comida",
    "breakfast": "desayuno",
    "lunch": "comida",
    "dinner": "cena",
    "bed": "cama",
    "room": "habitación",
    "shower": "ducha",
    "towel": "toalla",
    "key": "llave",
    "bathroom": "baño",
    "toilet": "aseo",
    "pharmacy": "farmacia",
    "doctor": "médico",
    "hospital": "hospital",
    "church": "iglesia",
    "cathedral": "catedral",
    "bridge": "puente",
    "river": "río",
    "town": "pueblo",
    "village": "aldea",
    "city": "ciudad",
    "street": "calle",
    "square": "plaza",
    "road": "carretera",
    "path": "sendero",
    "way": "camino",
    "hill": "colina",
    "mountain": "montaña",
    "pilgrim": "peregrino",
    "hostel": "albergue",
    "hotel": "hotel",
    "backpack": "mochila",
    "boots": "botas",
    "shell": "concha",
    "stamp": "sello",
    "rain": "lluvia",
    "sun": "sol",
    "hot": "calor",
    "cold": "frío",
    "tired": "cansado",
    "help": "ayuda",
    "ticket": "billete",
    "bus": "autobús",
    "taxi": "taxi",
    "station": "estación",
    "supermarket": "supermercado",
    "bank": "banco",
    "money": "dinero",
    "one": "uno",
    "two": "dos",
    "three": "tres",
    "four": "cuatro",
    "five": "cinco",
    "ten": "diez",
    "kilometers": "kilómetros",
}

EN_FR = {
    "hello": "bonjour",
    "goodbye": "au revoir",
    "good morning": "bonjour",
    "good evening": "bonsoir",
    "good night": "bonne nuit",
    "please": "s'il vous plaît",
    "thank you": "merci",
    "thank you very much": "merci beaucoup",
    "yes": "oui",
    "no": "non",
    "excuse me": "excusez-moi",
    "sorry": "désolé",
    "good way": "bon chemin",
    "do you speak english": "parlez-vous anglais ?",
    "i don't understand": "je ne comprends pas",
    "where is the bathroom": "où sont les toilettes ?",
    "i am a pilgrim": "je suis pèlerin",
    "i am lost": "je suis perdu",
    "do you have a bed": "avez-vous un lit ?",
    "i have a reservation": "j'ai une réservation",
    "the bill please": "l'addition, s'il vous plaît",
    "how much does it cost": "combien ça coûte ?",
    "i need a doctor": "j'ai besoin d'un médecin",
    "my feet hurt": "j'ai mal aux pieds",
    "the": "le",
    "a": "un",
    "and": "et",
    "with": "avec",
    "without": "sans",
    "where": "où",
    "today": "aujourd'hui",
    "tomorrow": "demain",
    "water": "eau",
    "bread": "pain",
    "wine": "vin",
    "coffee": "café",
    "bed": "lit",
    "room": "chambre",
    "shower": "douche",
    "key": "clé",
    "bathroom": "salle de bain",
    "pharmacy": "pharmacie",
    "doctor": "médecin",
    "church": "église",
    "cathedral": "cathédrale",
    "bridge": "pont",
    "river": "rivière",
    "town": "ville",
    "village": "village",
    "street": "rue",
    "way": "chemin",
    "mountain": "montagne",
    "pilgrim": "pèlerin",
    "hostel": "gîte",
    "backpack": "sac à dos",
    "rain": "pluie",
    "tired": "fatigué",
    "help": "aide",
}

EN_DE = {
    "hello": "hallo",
    "goodbye": "auf wiedersehen",
    "good morning": "guten morgen",
    "good evening": "guten abend",
    "good night": "gute nacht",
    "please": "bitte",
    "thank you": "danke",
    "thank you very much": "vielen dank",
    "yes": "ja",
    "no": "nein",
    "excuse me": "entschuldigung",
    "good way": "guten weg",
    "do you speak english": "sprechen sie englisch?",
    "i don't understand": "ich verstehe nicht",
    "where is the bathroom": "wo ist die toilette?",
    "i am a pilgrim": "ich bin pilger",
    "i am lost": "ich habe mich verlaufen",
    "do you have a bed": "haben sie ein bett?",
    "the bill please": "die rechnung, bitte",
    "how much does it cost": "wie viel kostet das?",
    "i need a doctor": "ich brauche einen arzt",
    "my feet hurt": "meine füße tun weh",
    "the": "der",
    "and": "und",
    "with": "mit",
    "without": "ohne",
    "where": "wo",
    "today": "heute",
    "tomorrow": "morgen",
    "water": "wasser",
    "bread": "brot",
    "wine": "wein",
    "beer": "bier",
    "coffee": "kaffee",
    "bed": "bett",
    "room": "zimmer",
    "shower": "dusche",
    "key": "schlüssel",
    "pharmacy": "apotheke",
    "doctor": "arzt",
    "church": "kirche",
    "cathedral": "kathedrale",
    "bridge": "brücke",
    "river": "fluss",
    "town": "stadt",
    "village": "dorf",
    "street": "straße",
    "way": "weg",
    "mountain": "berg",
    "pilgrim": "pilger",
    "hostel": "herberge",
    "backpack": "rucksack",
    "rain": "regen",
    "tired": "müde",
    "help": "hilfe",
}

EN_IT = {
    "hello": "ciao",
    "goodbye": "arrivederci",
    "good morning": "buongiorno",
    "good evening": "buonasera",
    "good night": "buonanotte",
    "please": "per favore",
    "thank you": "grazie",
    "thank you very much": "grazie mille",
    "yes": "sì",
    "no": "no",
    "excuse me": "mi scusi",
    "good way": "buon cammino",
    "where is the bathroom": "dov'è il bagno?",
    "i am a pilgrim": "sono un pellegrino",
    "the bill please": "il conto, per favore",
    "how much does it cost": "quanto costa?",
    "i need a doctor": "ho bisogno di un medico",
    "the": "il",
    "and": "e",
    "with": "con",
    "where": "dove",
    "water": "acqua",
    "bread": "pane",
    "wine": "vino",
    "coffee": "caffè",
    "bed": "letto",
    "room": "camera",
    "church": "chiesa",
    "bridge": "ponte",
    "way": "cammino",
    "pilgrim": "pellegrino",
    "help": "aiuto",
}

EN_PT = {
    "hello": "olá",
    "goodbye": "adeus",
    "good morning": "bom dia",
    "good afternoon": "boa tarde",
    "good night": "boa noite",
    "please": "por favor",
    "thank you": "obrigado",
    "yes": "sim",
    "no": "não",
    "excuse me": "com licença",
    "good way": "bom caminho",
    "where is the bathroom": "onde fica a casa de banho?",
    "i am a pilgrim": "sou peregrino",
    "the bill please": "a conta, por favor",
    "how much does it cost": "quanto custa?",
    "i need a doctor": "preciso de um médico",
    "the": "o",
    "and": "e",
    "with": "com",
    "where": "onde",
    "water": "água",
    "bread": "pão",
    "wine": "vinho",
    "coffee": "café",
    "bed": "cama",
    "room": "quarto",
    "church": "igreja",
    "bridge": "ponte",
    "way": "caminho",
    "pilgrim": "peregrino",
    "help": "ajuda",
}

PHRASEBOOKS = {
    ("en", "es"): EN_ES,
    ("en", "fr"): EN_FR,
    ("en", "de"): EN_DE,
    ("en", "it"): EN_IT,
    ("en", "pt-PT"): EN_PT,
}

# Sentence patterns: the captured remainder is translated separately and
# substituted for "{}".
IDIOM_PATTERNS = {
    ("en", "es"): [
        (r"^where is (.+)$", "¿dónde está {}?"),
        (r"^how do i get to (.+)$", "¿cómo llego a {}?"),
        (r"^how much (?:is|does) (.+?)(?: cost)?$", "¿cuánto cuesta {}?"),
        (r"^do you have (.+)$", "¿tiene {}?"),
        (r"^i need (.+)$", "necesito {}"),
        (r"^i would like (.+)$", "me gustaría {}"),
        (r"^i want (.+)$", "quiero {}"),
        (r"^is there (.+)$", "¿hay {}?"),
    ],
    ("es", "en"): [
        (r"^dónde está (.+)$", "where is {}?"),
        (r"^cuánto cuesta (.+)$", "how much does {} cost?"),
        (r"^tiene (.+)$", "do you have {}?"),
        (r"^necesito (.+)$", "i need {}"),
        (r"^hay (.+)$", "is there {}?"),
    ],
    ("en", "fr"): [
        (r"^where is (.+)$", "où est {} ?"),
        (r"^do you have (.+)$", "avez-vous {} ?"),
        (r"^i need (.+)$", "j'ai besoin de {}"),
    ],
    ("en", "de"): [
        (r"^where is (.+)$", "wo ist {}?"),
        (r"^do you have (.+)$", "haben sie {}?"),
        (r"^i need (.+)$", "ich brauche {}"),
    ],
    ("en", "it"): [
        (r"^where is (.+)$", "dov'è {}?"),
        (r"^i need (.+)$", "ho bisogno di {}"),
    ],
    ("en", "pt-PT"): [
        (r"^where is (.+)$", "onde fica {}?"),
        (r"^i need (.+)$", "preciso de {}"),
    ],
}
