# evaluation/leaderboard.py

from collections import defaultdict
from dataclasses import dataclass, asdict
from typing import Dict, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class LeaderboardEntry:
    player_name: str
    score: int
    elapsed_seconds: int

    def to_dict(self) -> Dict:
        return asdict(self)


class Leaderboard:
    """
    Process-lifetime record of finished sessions. Entries are appended
    when a game ends and are never changed or removed.
    """

    def __init__(self):
        self._entries: List[LeaderboardEntry] = []

    def record(self, player_name: str, score: int, elapsed_seconds: int) -> LeaderboardEntry:
        entry = LeaderboardEntry(player_name, int(score), int(elapsed_seconds))
        self._entries.append(entry)
        return entry

    @property
    def entries(self) -> Tuple[LeaderboardEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LeaderboardEntry]:
        return iter(tuple(self._entries))

    def best(self) -> Optional[LeaderboardEntry]:
        if not self._entries:
            return None
        return min(self._entries, key=lambda e: (-e.score, e.elapsed_seconds))

    def summarize(self) -> Dict[str, Dict]:
        stats = defaultdict(lambda: {"games": 0, "best_score": 0, "total_score": 0, "total_time": 0})
        for entry in self._entries:
            player = stats[entry.player_name]
            player["games"] += 1
            player["total_score"] += entry.score
            player["total_time"] += entry.elapsed_seconds
            player["best_score"] = max(player["best_score"], entry.score)

        summary = {}
        for name, s in stats.items():
            summary[name] = {
                "games": s["games"],
                "best_score": s["best_score"],
                "avg_score": s["total_score"] / s["games"],
                "avg_time": s["total_time"] / s["games"],
            }
        return summary

    def format_stats(self) -> str:
        if not self._entries:
            return "No player stats available."

        lines = ["Player Stats:"]
        for entry in self._entries:
            lines.append(
                f"Player: {entry.player_name}; Score: {entry.score}; Time: {entry.elapsed_seconds} seconds"
            )
        return "\n".join(lines) + "\n"

    def to_markdown(self) -> str:
        out = ["## 🏆 Minesweeper Leaderboard", ""]
        out.append("| Player | Score | Time (s) |")
        out.append("|--------|-------|----------|")
        for entry in self._entries:
            out.append(f"| {entry.player_name} | {entry.score} | {entry.elapsed_seconds} |")
        return "\n".join(out) + "\n"
