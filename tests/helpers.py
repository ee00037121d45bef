import sys
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Tuple


def project_root() -> Path:
    # helpers.py resides in tests/, go one level up
    return Path(__file__).resolve().parents[1]


def write_table(
    path: Path,
    rows: Sequence[Sequence[str]],
    header: Optional[Sequence[str]] = ("name", "sequence"),
    comments: Sequence[str] = (),
    delimiter: str = ",",
) -> Path:
    """Write an ASO table with optional header and leading comment lines."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    lines: List[str] = [f"# {c}" for c in comments]
    if header is not None:
        lines.append(delimiter.join(header))
    lines.extend(delimiter.join(r) for r in rows)
    path.write_text("\n".join(lines) + "\n")
    return path


def run_asosim(args: Sequence[str], check: bool = True) -> subprocess.CompletedProcess:
    """Run ``python -m asosim`` from the project root and capture output."""
    return subprocess.run(
        [sys.executable, "-m", "asosim", *args],
        cwd=project_root(),
        check=check,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )


def match_lines(stdout: str) -> List[Tuple[str, str, str]]:
    """Return (name, sequence, distance) for every match line of a report."""
    out = []
    for line in stdout.splitlines()[1:]:
        cols = [c.strip() for c in line.split("\t")]
        if len(cols) == 5:
            out.append((cols[2], cols[3], cols[4]))
    return out
