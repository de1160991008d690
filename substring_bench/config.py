# config.py
# Process-wide settings for the substring search benchmark.

# === CORPORA ===
# Books searched when none are given on the command line.
BOOKS = [
    "The Great Gatsby.txt",
    "Harry Potter and the Chamber of Secrets.txt",
    "Harry Potter and the Prisoner of Azkaban.txt",
    "Harry Potter and the Goblet of Fire.txt",
    "Harry Potter and the Order of the Phoenix.txt",
    "Harry Potter and The Half-Blood Prince.txt",
    "Harry Potter and the Deathly Hallows.txt",
    "Harry Potter and the Sorcerer's Stone.txt",
]

ENCODING = "utf-8"

# === PATTERNS ===
PATTERNS = [
    "Harry",
    "I dunno",
    "What's up?",
    "Hermione and Ron",
    "said Professor McGonagall",
]

# === RABIN-KARP ===
PRIME = 257            # radix of the polynomial hash
MOD = 1000000007       # large prime modulus

# === HARNESS / REPORT ===
TIME_PRECISION = 5     # decimal places of seconds in the report
WORKERS = 1            # >1 runs (book, pattern) pairs in separate processes

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
