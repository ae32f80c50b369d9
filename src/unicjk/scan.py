import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from unicjk.config import ScanConfig, config_path, load_config
from unicjk.util.language_helpers import cjk_char_fraction, cjk_chars
from unicjk.util.string_helpers import cjk_runs

logger = logging.getLogger(__name__)


def scan_text(text: str, scan_config: ScanConfig) -> dict:
    fraction = cjk_char_fraction(text, alpha_only=scan_config.alpha_only)
    return {
        "cjk_count": len(cjk_chars(text)),
        "total_count": len(text),
        "fraction": fraction,
        "is_cjk_text": fraction > 0 and fraction >= scan_config.min_cjk_fraction,
        "runs": [run for run_is_cjk, run in cjk_runs(text) if run_is_cjk],
    }


def scan_paths(paths: list[str], scan_config: ScanConfig) -> list[tuple[str, dict]]:
    results = []
    for path in tqdm(paths, desc="Scanning files", disable=len(paths) < 2):
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping {path}: {e}")
            continue
        results.append((path, scan_text(text, scan_config)))
    logger.info(f"Scanned {len(results)} of {len(paths)} files")
    return results


def format_result(name: str, result: dict, show_runs: bool) -> str:
    fields = [
        name,
        str(result["cjk_count"]),
        f"{result['fraction']:.4f}",
        "cjk" if result["is_cjk_text"] else "non-cjk",
    ]
    if show_runs:
        fields.append(" ".join(result["runs"]))
    return "\t".join(fields)


def _load_scan_config(config_name: str) -> ScanConfig:
    if config_name == "default" and not config_path(config_name).exists():
        logger.warning(f"{config_path(config_name)} not found; using built-in scan defaults")
        return ScanConfig()
    return load_config(config_name).scan


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description="Report CJK content of text files")
    parser.add_argument("--config-name", type=str, default="default")
    parser.add_argument("paths", nargs="*")
    args = parser.parse_args(argv)
    scan_config = _load_scan_config(args.config_name)

    if args.paths:
        results = scan_paths(args.paths, scan_config)
    else:
        results = [("-", scan_text(sys.stdin.buffer.read().decode("utf-8"), scan_config))]
    for name, result in results:
        print(format_result(name, result, scan_config.show_runs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
