#!/usr/bin/env python3
"""Validate that all artifacts are accessible via loader"""

import sys
from pathlib import Path

# Add parent directory to path so we can import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from ip_registration.artifacts.loader import (
    load_artifact,
    list_available_contracts,
)
from ip_registration.interfaces import WORK_REGISTRATION


def validate():
    """Validate that all exposed contracts are loadable"""
    print("Validating package...")

    contracts = list_available_contracts()
    print(f"\nFound {len(contracts)} exposed contracts:")

    required = {sig.split("(")[0] for sig in WORK_REGISTRATION.functions}

    all_valid = True
    for name in contracts:
        try:
            artifact = load_artifact(name)
            abi = artifact.get("abi", [])
            functions = {item["name"] for item in abi if item.get("type") == "function"}

            if not abi:
                print(f"  ⚠️  {name}: No ABI found")
                all_valid = False
            elif "Work" in name and "Factory" not in name and not required <= functions:
                missing = ", ".join(sorted(required - functions))
                print(f"  ⚠️  {name}: missing {missing}")
                all_valid = False
            else:
                print(f"  ✅ {name}: {len(abi)} ABI items")
        except (FileNotFoundError, ValueError) as e:
            print(f"  ❌ {name}: {e}")
            all_valid = False

    print()
    if all_valid:
        print("✅ All contracts valid!")
        return 0
    else:
        print("❌ Some contracts failed validation")
        return 1


if __name__ == "__main__":
    sys.exit(validate())
