"""Constants and mappings for the box pool engine."""

GRID_SIZE = 10
DIGITS = list(range(GRID_SIZE))

DEFAULT_POOL_NAME = 'Super Bowl Box'
DEFAULT_CURRENCY = 'USD'

# Score change pools without a cap still need a finite period list
DEFAULT_MAX_SCORE_CHANGES = 25

# Owner label matching
FUZZY_MATCH_THRESHOLD = 0.75
OCR_SUBSTITUTIONS = {
    '0': 'o',
    '1': 'l',
    '5': 's',
}

# Share codes skip look-alike characters (0/O, 1/I)
SHARE_CODE_ALPHABET = 'ABCDEFGHJKLMNPQRSTUVWXYZ23456789'
SHARE_CODE_LENGTH = 8

CURRENCY_SYMBOLS = {
    'USD': '$',
    'CAD': 'CA$',
    'AUD': 'A$',
    'EUR': '€',
    'GBP': '£',
    'JPY': '¥',
    'MXN': 'MX$',
}

# Team name to abbreviation mapping
TEAM_ABBREV_MAP = {
    'Arizona Cardinals': 'ARI',
    'Atlanta Falcons': 'ATL',
    'Baltimore Ravens': 'BAL',
    'Buffalo Bills': 'BUF',
    'Carolina Panthers': 'CAR',
    'Chicago Bears': 'CHI',
    'Cincinnati Bengals': 'CIN',
    'Cleveland Browns': 'CLE',
    'Dallas Cowboys': 'DAL',
    'Denver Broncos': 'DEN',
    'Detroit Lions': 'DET',
    'Green Bay Packers': 'GB',
    'Houston Texans': 'HOU',
    'Indianapolis Colts': 'IND',
    'Jacksonville Jaguars': 'JAX',
    'Kansas City Chiefs': 'KC',
    'Las Vegas Raiders': 'LV',
    'Los Angeles Chargers': 'LAC',
    'Los Angeles Rams': 'LAR',
    'Miami Dolphins': 'MIA',
    'Minnesota Vikings': 'MIN',
    'New England Patriots': 'NE',
    'New Orleans Saints': 'NO',
    'New York Giants': 'NYG',
    'New York Jets': 'NYJ',
    'Philadelphia Eagles': 'PHI',
    'Pittsburgh Steelers': 'PIT',
    'San Francisco 49ers': 'SF',
    'Seattle Seahawks': 'SEA',
    'Tampa Bay Buccaneers': 'TB',
    'Tennessee Titans': 'TEN',
    'Washington Commanders': 'WAS',
}

# Reverse mapping
ABBREV_TO_TEAM = {v: k for k, v in TEAM_ABBREV_MAP.items()}

# Alternate abbreviations seen on printed sheets
TEAM_ABBREV_NORMALIZE = {
    'JAC': 'JAX',
    'LA': 'LAR',
    'WSH': 'WAS',
}

# Spreadsheet layout (1-based rows/columns)
SHEET_AWAY_LABEL_CELL = (1, 1)
SHEET_HOME_LABEL_CELL = (1, 2)
SHEET_HOME_DIGITS_ROW = 2
SHEET_AWAY_DIGITS_COLUMN = 1
SHEET_FIRST_SQUARE_ROW = 3
SHEET_FIRST_SQUARE_COLUMN = 2
