"""Setup helpers for setup.py in municipal.structures package."""

from pathlib import Path


def parse_requirements(fname):
    """Turn requirements.txt into a list"""
    requirements = []
    for line in Path(fname).read_text(encoding="utf-8").splitlines():
        line = line.split("#", 1)[0].strip()
        if line:
            requirements.append(line)
    return requirements
