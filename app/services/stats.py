"""Running statistics of analyses served by this process.

Kept in memory only; they reset when the process restarts.
"""

from deps import Dict, List, threading

from baseline_checker.issue import CompatibilityResult

# (badge, minimum scans, minimum average score)
BADGES = (
    ("First Scan", 1, 0),
    ("Regular User", 10, 0),
    ("Expert", 50, 0),
    ("High Compatibility", 1, 90),
    ("Perfect Score Master", 1, 95),
)


class ScanStats:
    """Thread-safe counters updated once per completed analysis."""

    def __init__(self):
        self._lock = threading.Lock()
        self.total_scans = 0
        self.score_total = 0
        self.current_score = 0
        self.issues_found = 0

    def record(self, result: CompatibilityResult) -> None:
        with self._lock:
            self.total_scans += 1
            self.score_total += result.score
            self.current_score = result.score
            self.issues_found = len(result.issues)

    @property
    def average_score(self) -> float:
        return self.score_total / self.total_scans if self.total_scans else 0.0

    def badges(self) -> List[str]:
        with self._lock:
            return self._badges()

    def _badges(self) -> List[str]:
        return [
            name
            for name, min_scans, min_average in BADGES
            if self.total_scans >= min_scans and self.average_score >= min_average
        ]

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "totalScans": self.total_scans,
                "averageScore": round(self.average_score),
                "currentScore": self.current_score,
                "issuesFound": self.issues_found,
                "badges": self._badges(),
            }

    def reset(self) -> None:
        with self._lock:
            self.total_scans = 0
            self.score_total = 0
            self.current_score = 0
            self.issues_found = 0
