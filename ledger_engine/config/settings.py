import os
from decimal import Decimal

# Amount precision
CENT = Decimal("0.01")

# Rate conversion
MONTHS_PER_YEAR = 12
DAYS_PER_YEAR = 365

# Simulation horizon (50 years)
DEFAULT_MAX_MONTHS = 600

# Logging
LOG_LEVEL = os.environ.get("LEDGER_ENGINE_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.environ.get("LEDGER_ENGINE_LOG_FORMAT", "console")  # console | json
