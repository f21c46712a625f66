"""Write rendered CSV tables to disk."""
from pathlib import Path
from typing import Dict, List, Union

SEPARATE_SUFFIXES = {
    "releases": "_releases.csv",
    "sales": "_sales.csv",
    "espp_purchases": "_espp_purchases.csv",
}


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def write_combined(path: Union[str, Path], csv_text: str) -> Path:
    return _write(Path(path), csv_text)


def write_separate(prefix: Union[str, Path], tables: Dict[str, str]) -> List[Path]:
    """
    Write <prefix>_releases.csv, <prefix>_sales.csv, <prefix>_espp_purchases.csv.
    All three or none: if one write fails the files already written are removed.
    """
    written: List[Path] = []
    try:
        for key, suffix in SEPARATE_SUFFIXES.items():
            written.append(_write(Path(f"{prefix}{suffix}"), tables[key]))
    except OSError:
        for path in written:
            path.unlink(missing_ok=True)
        raise
    return written
