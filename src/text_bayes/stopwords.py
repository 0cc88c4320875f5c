"""Built-in stopword lists for the default tokenizer.

Lists are keyed by the same language names the stemmer registry uses.
Languages without a list simply skip stopword removal.
"""

from __future__ import annotations

from typing import Optional

# ---------------------------------------------------------------------------
# Stopword data
# ---------------------------------------------------------------------------

_ENGLISH: frozenset[str] = frozenset({
    "a", "about", "above", "after", "again", "against", "all", "am", "an",
    "and", "any", "are", "as", "at", "be", "because", "been", "before",
    "being", "below", "between", "both", "but", "by", "can", "could", "did",
    "do", "does", "doing", "down", "during", "each", "few", "for", "from",
    "further", "had", "has", "have", "having", "he", "her", "here", "hers",
    "herself", "him", "himself", "his", "how", "i", "if", "in", "into", "is",
    "it", "its", "itself", "just", "me", "more", "most", "my", "myself", "no",
    "nor", "not", "now", "of", "off", "on", "once", "only", "or", "other",
    "our", "ours", "ourselves", "out", "over", "own", "same", "she", "should",
    "so", "some", "such", "than", "that", "the", "their", "theirs", "them",
    "themselves", "then", "there", "these", "they", "this", "those",
    "through", "to", "too", "under", "until", "up", "very", "was", "we",
    "were", "what", "when", "where", "which", "while", "who", "whom", "why",
    "will", "with", "would", "you", "your", "yours", "yourself", "yourselves",
})

_SPANISH: frozenset[str] = frozenset({
    "a", "al", "algo", "algunas", "algunos", "ante", "antes", "como", "con",
    "contra", "cual", "cuando", "de", "del", "desde", "donde", "durante",
    "e", "el", "ella", "ellas", "ellos", "en", "entre", "era", "es", "esa",
    "esas", "ese", "eso", "esos", "esta", "estaba", "estas", "este", "esto",
    "estos", "fue", "ha", "hasta", "hay", "la", "las", "le", "les", "lo",
    "los", "me", "mi", "mucho", "muy", "nada", "ni", "no", "nos", "nosotros",
    "o", "otra", "otro", "para", "pero", "poco", "por", "porque", "que",
    "quien", "se", "sea", "ser", "si", "sin", "sobre", "son", "su", "sus",
    "también", "tanto", "te", "tiene", "todo", "todos", "tu", "un", "una",
    "uno", "unos", "y", "ya", "yo",
})

_FRENCH: frozenset[str] = frozenset({
    "a", "au", "aux", "avec", "ce", "ces", "dans", "de", "des", "du", "elle",
    "elles", "en", "est", "et", "eux", "il", "ils", "je", "la", "le", "les",
    "leur", "lui", "ma", "mais", "me", "mes", "moi", "mon", "ne", "nos",
    "notre", "nous", "on", "ou", "par", "pas", "pour", "qu", "que", "qui",
    "sa", "se", "ses", "son", "sur", "ta", "te", "tes", "toi", "ton", "tu",
    "un", "une", "vos", "votre", "vous", "été", "être", "avoir", "ont",
    "sont", "était", "cette", "cet", "y",
})

_GERMAN: frozenset[str] = frozenset({
    "aber", "alle", "als", "also", "am", "an", "auch", "auf", "aus", "bei",
    "bin", "bis", "bist", "da", "damit", "dann", "das", "dass", "dein",
    "dem", "den", "der", "des", "dich", "die", "dir", "doch", "du", "ein",
    "eine", "einem", "einen", "einer", "er", "es", "euch", "für", "hat",
    "hatte", "ich", "ihm", "ihn", "ihr", "im", "in", "ist", "ja", "kann",
    "man", "mich", "mir", "mit", "nach", "nicht", "noch", "nun", "nur", "ob",
    "oder", "sehr", "sein", "sich", "sie", "sind", "so", "um", "und", "uns",
    "unter", "vom", "von", "vor", "war", "was", "wenn", "wer", "wie", "wir",
    "wird", "zu", "zum", "zur",
})

_ITALIAN: frozenset[str] = frozenset({
    "a", "ad", "al", "alla", "anche", "che", "chi", "con", "da", "dal",
    "dalla", "del", "della", "di", "e", "ed", "gli", "ha", "i", "il", "in",
    "io", "la", "le", "lei", "lo", "loro", "lui", "ma", "mi", "ne", "nel",
    "nella", "noi", "non", "o", "per", "più", "quello", "questo", "se",
    "si", "sono", "su", "sua", "suo", "ti", "tu", "un", "una", "uno", "voi",
})

_PORTUGUESE: frozenset[str] = frozenset({
    "a", "ao", "aos", "as", "com", "como", "da", "das", "de", "do", "dos",
    "e", "ela", "elas", "ele", "eles", "em", "entre", "era", "eu", "foi",
    "há", "isso", "isto", "já", "lhe", "mais", "mas", "me", "meu", "minha",
    "muito", "na", "nas", "no", "nos", "não", "o", "os", "ou", "para",
    "pela", "pelo", "por", "que", "se", "sem", "seu", "sua", "são", "também",
    "te", "um", "uma", "você",
})

_DUTCH: frozenset[str] = frozenset({
    "aan", "al", "als", "bij", "dat", "de", "die", "dit", "een", "en", "er",
    "had", "heb", "heeft", "het", "hij", "hoe", "ik", "in", "is", "je",
    "kan", "maar", "me", "met", "mij", "naar", "niet", "nog", "nu", "of",
    "om", "ook", "op", "over", "te", "tot", "uit", "van", "voor", "was",
    "wat", "we", "wel", "werd", "wij", "zal", "ze", "zich", "zij", "zijn",
    "zo",
})

_DANISH: frozenset[str] = frozenset({
    "ad", "af", "alle", "alt", "anden", "at", "blev", "blive", "bliver",
    "da", "de", "dem", "den", "denne", "der", "deres", "det", "dette", "dig",
    "din", "disse", "dog", "du", "efter", "eller", "en", "end", "er", "et",
    "for", "fra", "ham", "han", "hans", "har", "havde", "have", "hende",
    "hendes", "her", "hos", "hun", "hvad", "hvis", "hvor", "i", "ikke",
    "ind", "jeg", "jer", "jo", "kunne", "man", "mange", "med", "meget",
    "men", "mig", "min", "mine", "mit", "mod", "ned", "noget", "nogle", "nu",
    "når", "og", "også", "om", "op", "os", "over", "på", "selv", "sig",
    "sin", "sine", "sit", "skal", "skulle", "som", "sådan", "thi", "til",
    "ud", "under", "var", "vi", "vil", "ville", "vor", "være", "været",
})

_NORWEGIAN: frozenset[str] = frozenset({
    "alle", "at", "av", "bare", "begge", "ble", "blei", "bli", "blir",
    "blitt", "både", "da", "de", "deg", "dem", "den", "denne", "der",
    "dere", "deres", "det", "dette", "di", "din", "disse", "ditt", "du",
    "dykk", "eg", "ein", "eit", "eller", "en", "enn", "er", "et", "ett",
    "etter", "for", "fordi", "fra", "før", "ha", "hadde", "han", "hans",
    "har", "hennar", "henne", "hennes", "her", "hjå", "ho", "hoe", "honom",
    "hoss", "hossen", "hun", "hva", "hvem", "hver", "hvilke", "hvilken",
    "hvis", "hvor", "hvordan", "hvorfor", "i", "ikke", "ingen", "inn",
    "ja", "jeg", "kan", "kom", "kun", "kunne", "man", "mange", "me", "meg",
    "mellom", "men", "mi", "min", "mine", "mitt", "mot", "mye", "nå", "når",
    "noe", "noen", "og", "også", "om", "opp", "oss", "over", "på", "samme",
    "seg", "selv", "si", "sia", "sidan", "siden", "sin", "sine", "sitt",
    "skal", "skulle", "slik", "so", "som", "så", "sånn", "til", "um",
    "under", "ut", "uten", "var", "vart", "ved", "vi", "vil", "ville",
    "vore", "vors", "vort", "vår", "være", "vært", "å",
})

_SWEDISH: frozenset[str] = frozenset({
    "alla", "allt", "att", "av", "blev", "bli", "blir", "blivit", "de",
    "dem", "den", "denna", "deras", "dess", "dessa", "det", "detta", "dig",
    "din", "dina", "ditt", "du", "där", "då", "efter", "ej", "eller", "en",
    "er", "era", "ert", "ett", "från", "för", "ha", "hade", "han", "hans",
    "har", "henne", "hennes", "hon", "honom", "hur", "här", "i", "icke",
    "ingen", "inom", "inte", "jag", "ju", "kan", "kunde", "man", "med",
    "mellan", "men", "mig", "min", "mina", "mitt", "mot", "mycket", "ni",
    "nu", "när", "någon", "något", "några", "och", "om", "oss", "på",
    "samma", "sedan", "sig", "sin", "sina", "sitt", "själv", "skulle",
    "som", "så", "sådan", "sådana", "sådant", "till", "under", "upp", "ut",
    "utan", "vad", "var", "vara", "varför", "varit", "varje", "vars",
    "vart", "vem", "vi", "vid", "vilka", "vilkas", "vilken", "vilket",
    "vår", "våra", "vårt", "än", "är", "åt", "över",
})

_FINNISH: frozenset[str] = frozenset({
    "ei", "eivät", "emme", "en", "et", "ette", "he", "heidän", "heitä",
    "hän", "hänen", "häntä", "itse", "ja", "johon", "joiden", "joka",
    "jolla", "jonka", "jos", "jossa", "josta", "jotka", "kanssa", "keiden",
    "ketkä", "koska", "kuin", "kuka", "kun", "me", "meidän", "meitä",
    "mikä", "minä", "minun", "minut", "minua", "mitkä", "mitä", "mukaan",
    "mutta", "ne", "niiden", "niin", "niitä", "noin", "nyt", "olemme",
    "olen", "olet", "olette", "oli", "olisi", "olla", "ollut", "on", "ovat",
    "poikki", "se", "sekä", "sen", "siinä", "sillä", "sinä", "sinun",
    "sitä", "tai", "te", "teidän", "tämä", "tämän", "tätä", "vaan", "vai",
    "vaikka", "yli",
})

_HUNGARIAN: frozenset[str] = frozenset({
    "a", "abban", "ahhoz", "ahol", "akkor", "aki", "amely", "ami", "amit",
    "az", "azok", "azonban", "azt", "azután", "be", "csak", "de", "e",
    "egy", "egyes", "egyik", "el", "elég", "én", "és", "ez", "ezek", "ezt",
    "fel", "felé", "ha", "hanem", "hiszen", "hogy", "hogyan", "igen", "így",
    "is", "itt", "ki", "kell", "le", "lehet", "lesz", "lett", "már", "meg",
    "még", "mert", "mi", "miért", "mikor", "milyen", "minden", "mint",
    "most", "nagyon", "neki", "nem", "nincs", "ő", "ők", "olyan", "ott",
    "pedig", "sem", "sok", "szerint", "te", "ti", "több", "új", "úgy",
    "után", "vagy", "valami", "van", "vele", "volt",
})

_ROMANIAN: frozenset[str] = frozenset({
    "a", "acea", "aceasta", "această", "acel", "acest", "acesta", "acum",
    "ai", "al", "ale", "am", "ar", "are", "au", "avea", "aș", "care", "ce",
    "cea", "cei", "cel", "cele", "cu", "cum", "că", "dar", "de", "deci",
    "deja", "din", "după", "ea", "ei", "el", "ele", "este", "eu", "fi",
    "fie", "fost", "la", "le", "li", "lor", "lui", "mai", "ne", "nici",
    "noi", "nu", "o", "ori", "pe", "pentru", "prin", "sau", "se", "sub",
    "sunt", "să", "său", "tu", "un", "una", "unei", "unui", "voi", "vă",
    "îi", "îl", "în", "încă", "între", "își", "și",
})

_RUSSIAN: frozenset[str] = frozenset({
    "а", "без", "более", "бы", "был", "была", "были", "было", "быть", "в",
    "вам", "вас", "ведь", "во", "вот", "все", "всегда", "всего", "всех",
    "вы", "где", "да", "даже", "для", "до", "его", "ее", "если", "есть",
    "еще", "же", "за", "здесь", "и", "из", "или", "им", "их", "к", "как",
    "какой", "когда", "кто", "ли", "лучше", "между", "меня", "мне", "много",
    "может", "можно", "мой", "моя", "мы", "на", "над", "надо", "нас", "не",
    "него", "нее", "нет", "ни", "них", "ничего", "но", "ну", "о", "об",
    "он", "она", "они", "опять", "от", "перед", "по", "под", "после",
    "потом", "потому", "почти", "при", "про", "раз", "с", "сам", "себе",
    "себя", "со", "совсем", "так", "такой", "там", "тебя", "тем", "теперь",
    "то", "тогда", "того", "тоже", "только", "том", "тот", "тут", "ты",
    "у", "уже", "хоть", "чего", "чем", "через", "что", "чтобы", "эти",
    "этого", "этой", "этом", "этот", "эту", "я",
})

_ARABIC: frozenset[str] = frozenset({
    "أن", "أنا", "أنت", "أو", "أي", "أيضا", "إذا", "إلى", "إن", "التي",
    "الذي", "الذين", "بعد", "بين", "ثم", "حتى", "ذلك", "على", "عليه",
    "عن", "عند", "فيه", "فيها", "في", "قبل", "قد", "كان", "كانت", "كل",
    "كما", "لا", "لكن", "لم", "لن", "له", "لها", "ما", "مع", "من", "منه",
    "منها", "نحن", "هذا", "هذه", "هم", "هنا", "هناك", "هو", "هي", "و",
})

_STOPWORDS: dict[str, frozenset[str]] = {
    "arabic": _ARABIC,
    "danish": _DANISH,
    "dutch": _DUTCH,
    "english": _ENGLISH,
    "finnish": _FINNISH,
    "french": _FRENCH,
    "german": _GERMAN,
    "hungarian": _HUNGARIAN,
    "italian": _ITALIAN,
    "norwegian": _NORWEGIAN,
    "porter": _ENGLISH,
    "portuguese": _PORTUGUESE,
    "romanian": _ROMANIAN,
    "russian": _RUSSIAN,
    "spanish": _SPANISH,
    "swedish": _SWEDISH,
}


def get_stopwords(language: Optional[str]) -> Optional[frozenset[str]]:
    """Return the stopword set for ``language``, or ``None`` if unsupported."""
    if not language or not language.strip():
        return None
    return _STOPWORDS.get(language.strip().lower())


def supported_languages() -> list[str]:
    """Languages that ship a stopword list."""
    return sorted(_STOPWORDS)
