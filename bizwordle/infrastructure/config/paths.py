# bizwordle/infrastructure/config/paths.py
from dataclasses import dataclass
from pathlib import Path


@dataclass
class RepoPaths:
    root: Path
    dataset: Path
    cache: Path
    marker: Path

    @classmethod
    def from_root(cls, root: Path) -> "RepoPaths":
        return cls(
            root=root,
            dataset=root / "data" / "companies" / "bizwordle.csv",
            cache=root / "cache",
            marker=root / "cache" / "player_state.json",
        )


def find_repo_root(start: Path) -> Path:
    """
    Heuristics:
      1) If current or any parent contains "data/companies", that's the repo root.
      2) Fallback to three levels up from this file:
         <root>/bizwordle/infrastructure/config/paths.py -> parents[3] == <root>.
    """
    cur = start.resolve()
    for p in [cur, *cur.parents]:
        if (p / "data" / "companies").exists():
            return p
    return Path(__file__).resolve().parents[3]
