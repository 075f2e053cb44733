"""
Compare the settings the application reads against a dotenv file.

Usage:
  python scripts/verify_env_vars.py [.env.example]
"""
import sys
from pathlib import Path

from dotenv import dotenv_values
from pydantic import AliasChoices

from subscription_gateway.config import Settings


def settings_env_vars():
    """Environment variable names accepted by Settings."""
    names = set()
    for field in Settings.model_fields.values():
        alias = field.validation_alias or field.alias
        if isinstance(alias, AliasChoices):
            names.update(choice for choice in alias.choices if isinstance(choice, str))
        elif isinstance(alias, str):
            names.add(alias)
    return sorted(names)


def dotenv_vars(path: Path):
    return sorted(dotenv_values(path))


def verify(path: Path) -> int:
    code_vars = set(settings_env_vars())
    file_vars = set(dotenv_vars(path))
    unknown = sorted(file_vars - code_vars)
    unset = sorted(code_vars - file_vars)

    print("=== ENV VAR VERIFICATION ===")
    print(f"Settings accept: {len(code_vars)} vars")
    print(f"{path} sets: {len(file_vars)} vars")
    print("")
    if unknown:
        print(f"UNKNOWN IN {path} ({len(unknown)}):")
        for v in unknown:
            print(f"  - {v}")
    else:
        print("No unknown vars.")
    print("")
    if unset:
        print(f"USING DEFAULTS ({len(unset)}):")
        for v in unset:
            print(f"  - {v}")
    return 1 if unknown else 0


if __name__ == "__main__":
    sys.exit(verify(Path(sys.argv[1] if len(sys.argv) > 1 else ".env.example")))
