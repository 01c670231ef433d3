"""App-wide constants and Flask configuration."""

# ── Projection horizon ───────────────────────────────────────────────
HORIZON_YEARS = 32
MONTHS_PER_YEAR = 12

# ── Debt payoff ─────────────────────────────────────────────────────
LOAN_TERM_CAP_MONTHS = 360         # 30 years; loans not cleared by then stop here

# ── Input bounds ────────────────────────────────────────────────────
MAX_AMOUNT = 1_000_000_000.0       # largest dollar input accepted

# ── Chart ───────────────────────────────────────────────────────────
TICK_TARGET = 5
CHART_WIDTH = 100.0
CHART_HEIGHT = 100.0
LABEL_AREA_WIDTH = 10.0
BAR_SPACING = 0.5
X_LABEL_STOPS = (0, 25, 50, 75, 100)  # percent of chart width
CHART_VALUE_LIMIT = 1e300             # keeps tick arithmetic finite
NO_DATA_MESSAGE = "No data to display chart."

# ── "What if I..." extra monthly amounts ────────────────────────────
WHAT_IF_EXTRAS = {
    "extra-100": 100.0,
    "skip-daily-coffee": 128.0,
    "skip-weekly-restaurant": 200.0,
}

# ── Page defaults ───────────────────────────────────────────────────
DEFAULT_PRINCIPAL = 10_000.0
DEFAULT_MONTHLY_CONTRIBUTION = 200.0
DEFAULT_ANNUAL_RATE_PERCENT = 9.0

DEFAULT_LOAN_BALANCE = 200_000.0
DEFAULT_LOAN_RATE_PERCENT = 6.0
DEFAULT_LOAN_PAYMENT = 1_200.0
DEFAULT_EXTRA_AMOUNT = 300.0

DEFAULT_INFLATION_PERCENT = 3.0
DEFAULT_RECESSION_RETURN_PERCENT = -15.0
DEFAULT_RECESSION_START_YEAR = 10
DEFAULT_RECESSION_DURATION_YEARS = 2
DEFAULT_INCOME_GROWTH_PERCENT = 0.0


class Config:
    """Settings loaded onto the Flask app by ``create_app``."""

    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]
    LOG_LEVEL = "INFO"
    TESTING = False
