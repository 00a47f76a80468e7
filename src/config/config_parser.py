"""
Config Parser

This file is used to parse the config file and the command line arguments.
Each configured energy term is turned into its measure name and a
ParameterList, ready to be applied to the term.
"""

import argparse
import json
from typing import Any, Dict, List, Optional, Sequence

import yaml

from config import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REPORT_FILL,
    DEFAULT_REPORT_WIDTH,
    DEFAULT_STRICT,
)
from src.core.parameters import ParameterList


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Energy Term Configuration"
    )

    parser.add_argument(
        "--config", type=str, default=DEFAULT_CONFIG_PATH, help="Path to config file"
    )
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Parameter applied to every energy term (repeatable)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when an energy term rejects a parameter",
    )
    parser.add_argument("--log-level", type=str, help="Logging level, e.g. DEBUG")

    # Report settings
    parser.add_argument("--width", type=int, help="Column width of the report")
    parser.add_argument("--fill", type=str, help="Pad character of the report")

    parser.add_argument(
        "--list-measures",
        action="store_true",
        help="List all energy measures with their alternative names and exit",
    )

    return parser.parse_args(argv)


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def parse_param_overrides(overrides: List[str]) -> ParameterList:
    """
    Convert "NAME=VALUE" strings into a ParameterList.

    Raises:
        ValueError: If an override has no '=' or an empty name.
    """
    params = ParameterList()
    for override in overrides:
        name, sep, value = override.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Invalid parameter override '{override}', expected NAME=VALUE")
        params.insert(name, value.strip())
    return params


def with_defaults(yaml_config: Dict[str, Any]) -> Dict[str, Any]:
    """Fill in missing sections and settings with their defaults."""
    config = dict(yaml_config)
    config["logging"] = {"level": DEFAULT_LOG_LEVEL, **(config.get("logging") or {})}
    config["energy"] = {
        "strict": DEFAULT_STRICT,
        "terms": [],
        **(config.get("energy") or {}),
    }
    config["report"] = {
        "width": DEFAULT_REPORT_WIDTH,
        "fill": DEFAULT_REPORT_FILL,
        **(config.get("report") or {}),
    }

    # Keys present in the file without a value fall back to their defaults
    if not config["logging"]["level"]:
        config["logging"]["level"] = DEFAULT_LOG_LEVEL
    if config["energy"]["strict"] is None:
        config["energy"]["strict"] = DEFAULT_STRICT
    if config["report"]["width"] is None:
        config["report"]["width"] = DEFAULT_REPORT_WIDTH
    if not config["report"]["fill"]:
        config["report"]["fill"] = DEFAULT_REPORT_FILL
    return config


def merge_configs(
    yaml_config: Dict[str, Any], args: argparse.Namespace
) -> Dict[str, Any]:
    """Merge YAML config with command line arguments. Arguments override YAML values."""
    config = with_defaults(yaml_config)

    if args.log_level:
        config["logging"]["level"] = args.log_level
    if args.strict:
        config["energy"]["strict"] = True
    if args.width is not None:
        config["report"]["width"] = args.width
    if args.fill is not None:
        config["report"]["fill"] = args.fill

    config["energy"]["overrides"] = parse_param_overrides(args.param)
    config["list_measures"] = args.list_measures

    return config


def get_term_configs(config: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Extract the energy terms from the configuration.

    Args:
        config (dict): Merged configuration dictionary.

    Returns:
        list: One dict per term with keys:
            - measure: Name of the energy measure
            - name: Name of the term, empty if not configured
            - parameters: ParameterList of file parameters followed by overrides

    Raises:
        ValueError: If a term has no measure.
    """
    overrides = config["energy"].get("overrides") or ParameterList()
    terms = []
    for index, entry in enumerate(config["energy"]["terms"] or []):
        measure = (entry or {}).get("measure")
        if not measure:
            raise ValueError(
                f"Configuration error: energy term #{index + 1} has no 'measure'."
            )
        params = ParameterList(entry.get("parameters") or {})
        params.merge(overrides)
        terms.append(
            {
                "measure": str(measure),
                "name": str(entry.get("name") or ""),
                "parameters": params,
            }
        )
    return terms


def print_config(config: Dict[str, Any]) -> None:
    """Print configuration in a formatted manner."""
    printable = dict(config)
    printable["energy"] = dict(config["energy"])
    overrides = printable["energy"].get("overrides")
    if overrides is not None:
        printable["energy"]["overrides"] = overrides.to_dict()
    print("\n" + "=" * 50)
    print("ENERGY CONFIGURATION")
    print("=" * 50)
    print(json.dumps(printable, indent=2, default=str))
    print("=" * 50 + "\n")


def get_config(argv: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    """Get final configuration by merging YAML and command line arguments."""
    args = parse_args(argv)
    yaml_config = {} if args.list_measures else load_config(args.config)
    final_config = merge_configs(yaml_config, args)

    if not final_config["list_measures"]:
        print_config(final_config)

    return final_config
