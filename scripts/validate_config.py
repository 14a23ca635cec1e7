#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from qsig_app.config.loader import ConfigLoader
from qsig_app.config.validation import ConfigValidator, ValidationError


def validate_asset_config(loader: ConfigLoader, asset_id: str) -> List[ValidationError]:
    """Validate configuration for a specific asset."""
    config = loader.merge_config(asset_id)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("Validating qsig configuration...")

    loader = ConfigLoader.create()
    assets_file = loader.config_dir / "assets.yaml"
    print(f"Config directory: {loader.config_dir}")
    if not assets_file.exists():
        print("No assets.yaml found, validating defaults only")

    asset_ids = sorted(loader.load_all_asset_ids()) + ["UNKNOWN-ASSET"]

    all_valid = True

    for asset_id in asset_ids:
        errors = validate_asset_config(loader, asset_id)

        if errors:
            print(f"[FAIL] {asset_id}: {len(errors)} validation errors")
            for error in errors:
                print(f"  - {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"[ OK ] {asset_id}")

    # Per-call overrides go through the same validation
    try:
        loader.load_engine_config("UNKNOWN-ASSET", {"signal": {"edge_threshold": 0.6}})
        print("[ OK ] per-call overrides")
    except ValueError as e:
        print(f"[FAIL] per-call overrides: {e}")
        all_valid = False

    if all_valid:
        print("\nAll configuration validation passed")
        sys.exit(0)
    else:
        print("\nConfiguration validation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
