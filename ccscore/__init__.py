"""ccscore core library: AI productivity scoring.

Public API re-exports for convenient imports:
    from ccscore import UsageLog, compute_score, grade_for, ...
"""

# Dates
from ccscore.dates import (
    parse_day,
    format_day,
    add_days,
    window_days,
)

# Models
from ccscore.models import (
    DayRecord,
    UsageLog,
    WindowAggregate,
    ConsistencyScore,
    AutonomyScore,
    GhostDaysScore,
    VolumeScore,
    StreakScore,
    Grade,
    ScoreReport,
)

# Window aggregation
from ccscore.window import (
    DEFAULT_WINDOW,
    iter_window,
    count_active_days,
    sum_autonomy_hours,
    count_ghost_days,
    sum_total_hours,
    aggregate_window,
)

# Streak
from ccscore.streak import compute_streak

# Scoring
from ccscore.scoring import (
    score_consistency,
    score_autonomy,
    score_ghost_days,
    score_volume,
    score_streak,
    compute_score,
)

# Grades
from ccscore.grade import GRADES, grade_for

# Data source
from ccscore.source import (
    DataUnavailableError,
    load_usage_log,
    load_usage_file,
)
