"""
Command line entry point for the identicon generator.

Usage:
    python identicon.py <input>
    identicon <input>

Writes `<input>.png` to the current directory (or to the `output_dir` of the
JSON config file named by the IDENTICON_CONFIG environment variable).
"""

import logging
import sys
from typing import List, Optional

from Identicon_Libs.exceptions import IdenticonError
from Identicon_Libs.PipelineLib.identicon_config import load_config_from_env
from Identicon_Libs.PipelineLib.identicon_pipeline import generate_identicon


def print_usage() -> None:
    print("Usage:")
    print("  python identicon.py <input>")
    print("\nCreates <input>.png, an identicon derived from the MD5 hash of <input>.")
    print("\nExamples:")
    print("  python identicon.py hipster")
    print("  python identicon.py asdf")


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the identicon tool. Returns the exit status."""
    args = sys.argv[1:] if argv is None else argv

    if len(args) != 1:
        print_usage()
        return 1

    try:
        config = load_config_from_env()
    except IdenticonError as e:
        print(f"Error: {e}")
        return 1

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        output_path = generate_identicon(args[0], config=config)
    except IdenticonError as e:
        print(f"Error: {e}")
        return 1

    print(f"Saved identicon to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
