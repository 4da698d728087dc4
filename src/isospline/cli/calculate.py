"""
Command-line interface for involute spline calculation.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from ..enums import RootType
from ..io.loaders import load_input_json, save_profile_json, SplineInput
from ..calculator.core import design_spline
from ..calculator.errors import SplineInputError
from ..calculator.validation import validate_spline
from ..calculator.output import to_json, to_markdown, to_summary
from ..calculator.sweep import (
    compare_pressure_angles,
    compare_tolerance_classes,
    format_table,
    PRESSURE_ANGLE_COLUMNS,
    TOLERANCE_CLASS_COLUMNS,
)
from ..core.profile import generate_profile

logger = logging.getLogger(__name__)

# CLI flag dest -> SplineInput field
_INPUT_FIELDS = {
    'module': 'module_mm',
    'teeth': 'num_teeth',
    'pressure_angle': 'pressure_angle_deg',
    'root_type': 'root_type',
    'tolerance_class': 'tolerance_class',
    'length': 'spline_length_mm',
    'external_deviation': 'external_deviation_um',
    'form_clearance': 'form_clearance_factor',
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="isospline",
        description="Calculate ISO 4156-1:2021 involute spline dimensions and tolerances",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default spline (m=2, z=20, 30° flat root, class 5)
  isospline

  # Aerospace spline, markdown report
  isospline --module 1 --teeth 48 --pressure-angle 37.5 --root-type fillet \\
            --tolerance-class 4 --length 25 --format markdown

  # Parameters from a JSON file, one value overridden, JSON result to file
  isospline --input spline.json --tolerance-class 6 --format json -o result.json

  # Export tooth profile coordinates
  isospline --module 2.5 --root-type fillet --profile-json profile.json --profile-points 150

  # Compare pressure angles for the same geometry
  isospline --module 2 --teeth 24 --compare pressure-angle

  # Fail (exit 2) when engineering validation reports errors
  isospline --external-deviation 5000 --strict
        """
    )

    parser.add_argument(
        '--module',
        type=float,
        default=None,
        help='Module in mm (default: 2)'
    )

    parser.add_argument(
        '--teeth',
        type=int,
        default=None,
        help='Number of teeth (default: 20)'
    )

    parser.add_argument(
        '--pressure-angle',
        type=float,
        default=None,
        help='Pressure angle in degrees: 30, 37.5 or 45 (default: 30)'
    )

    parser.add_argument(
        '--root-type',
        type=str,
        choices=[r.value for r in RootType],
        default=None,
        help='Root form (default: flat)'
    )

    parser.add_argument(
        '--tolerance-class',
        type=int,
        default=None,
        help='Tolerance class 4 (tightest) to 7 (default: 5)'
    )

    parser.add_argument(
        '--length',
        type=float,
        default=None,
        help='Spline length in mm (default: 50)'
    )

    parser.add_argument(
        '--external-deviation',
        type=float,
        default=None,
        help='Fundamental deviation of the external spline in µm (default: 0)'
    )

    parser.add_argument(
        '--form-clearance',
        type=float,
        default=None,
        help='Form clearance factor, multiplied by module (default: 0.1)'
    )

    parser.add_argument(
        '--input',
        type=str,
        default=None,
        help='JSON file with input parameters; flags given on the command line override it'
    )

    parser.add_argument(
        '--format',
        choices=['summary', 'markdown', 'json'],
        default='summary',
        help='Report format (default: summary)'
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='Write the report to a file instead of stdout'
    )

    parser.add_argument(
        '--profile-json',
        type=str,
        default=None,
        help='Save tooth profile coordinates to this JSON file'
    )

    parser.add_argument(
        '--profile-points',
        type=int,
        default=100,
        help='Involute samples per flank, greater than 10 (default: 100)'
    )

    parser.add_argument(
        '--compare',
        choices=['pressure-angle', 'tolerance-class'],
        default=None,
        help='Print a comparison table across pressure angles or tolerance classes'
    )

    parser.add_argument(
        '--strict',
        action='store_true',
        help='Exit with status 2 when engineering validation reports errors'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log intermediate values'
    )

    return parser


def _resolve_parameters(args: argparse.Namespace) -> dict:
    """Defaults, then --input file, then explicit flags"""
    base = load_input_json(args.input) if args.input else SplineInput()
    params = {field: getattr(base, field) for field in _INPUT_FIELDS.values()}

    for dest, field in _INPUT_FIELDS.items():
        value = getattr(args, dest)
        if value is not None:
            params[field] = value

    return params


def _write(text: str, output: str = None) -> None:
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        print(f"Saved: {output}", file=sys.stderr)
    else:
        print(text)


def _run_comparison(args: argparse.Namespace, params: dict) -> str:
    if args.compare == 'pressure-angle':
        rows = compare_pressure_angles(
            module=params['module_mm'],
            num_teeth=params['num_teeth'],
            tolerance_class=params['tolerance_class'],
            root_type=params['root_type'],
            spline_length=params['spline_length_mm']
        )
        title = (
            f"Pressure angle comparison: m={params['module_mm']:g}, "
            f"z={params['num_teeth']}, class {params['tolerance_class']}"
        )
        return format_table(rows, PRESSURE_ANGLE_COLUMNS, title=title)

    rows = compare_tolerance_classes(
        module=params['module_mm'],
        num_teeth=params['num_teeth'],
        pressure_angle=params['pressure_angle_deg'],
        root_type=params['root_type'],
        spline_length=params['spline_length_mm']
    )
    title = (
        f"Tolerance class comparison: m={params['module_mm']:g}, "
        f"z={params['num_teeth']}, α={params['pressure_angle_deg']:g}°"
    )
    return format_table(rows, TOLERANCE_CLASS_COLUMNS, title=title)


def main(argv=None):
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        params = _resolve_parameters(args)
        logger.debug(f"Resolved parameters: {params}")

        if args.compare:
            _write(_run_comparison(args, params), args.output)
            return 0

        result = design_spline(
            module=params['module_mm'],
            num_teeth=params['num_teeth'],
            pressure_angle=params['pressure_angle_deg'],
            root_type=params['root_type'],
            tolerance_class=params['tolerance_class'],
            spline_length=params['spline_length_mm'],
            external_deviation=params['external_deviation_um'],
            form_clearance=params['form_clearance_factor']
        )
        validation = validate_spline(result)

        if args.format == 'json':
            report = to_json(result, validation)
        elif args.format == 'markdown':
            report = to_markdown(result, validation)
        else:
            report = to_summary(result, validation)
        _write(report, args.output)

        if args.profile_json:
            profile = generate_profile(result, points_per_curve=args.profile_points)
            save_profile_json(profile, args.profile_json)
            print(f"Saved profile: {args.profile_json}", file=sys.stderr)

    except (SplineInputError, ValidationError, FileNotFoundError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.strict and not validation.valid:
        for msg in validation.errors:
            print(f"Validation error {msg.code}: {msg.message}", file=sys.stderr)
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
