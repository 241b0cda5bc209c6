#!/usr/bin/env python3
"""
Rewrite loader.py CONTRACT_PATHS from the artifacts shipped in the package
"""
import re
from pathlib import Path

ARTIFACTS_DIR = Path("ip_registration/data/artifacts")
LOADER_FILE = Path("ip_registration/artifacts/loader.py")


def discover_contracts():
    """Map contract names to artifact paths relative to ARTIFACTS_DIR"""
    contracts = {}
    for path in sorted(ARTIFACTS_DIR.rglob("*.json")):
        # Hardhat layout: <Source>.sol/<Contract>.json
        if path.parent.suffix != ".sol":
            continue
        contracts[path.stem] = path.relative_to(ARTIFACTS_DIR).as_posix()
    return contracts


def update_loader():
    """Update loader.py with current CONTRACT_PATHS"""
    if not LOADER_FILE.exists():
        print(f"❌ Error: {LOADER_FILE} not found")
        return False

    contracts = discover_contracts()
    if not contracts:
        print(f"❌ Error: no artifacts found under {ARTIFACTS_DIR}")
        return False

    content = LOADER_FILE.read_text()

    paths_lines = ["CONTRACT_PATHS = {"]
    for name, path in contracts.items():
        paths_lines.append(f'    "{name}": "{path}",')
    paths_lines.append("}")

    new_paths = "\n".join(paths_lines)

    pattern = r"CONTRACT_PATHS = \{[^}]*\}"
    updated_content = re.sub(pattern, new_paths, content, flags=re.DOTALL)

    LOADER_FILE.write_text(updated_content)

    print(f"✅ Updated loader.py with {len(contracts)} contracts:")
    for name in contracts:
        print(f"   - {name}")

    return True


if __name__ == "__main__":
    import sys
    success = update_loader()
    sys.exit(0 if success else 1)
