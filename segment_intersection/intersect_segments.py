#!/usr/bin/env python3

# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Main user entry point - loads a crossing job, intersects, and exports."""

import sys
import argparse
from pathlib import Path

if __name__ == '__main__':
    sys.path.insert(0, str(Path(__file__).parent.parent))

from segment_intersection import path_utils
from segment_intersection.exceptions import NoIntersectionError
from segment_intersection.intersection import DEFAULT_TOLERANCE, intersect
from segment_intersection.line_segment import LineSegment
from segment_intersection.point import Point


def parse_arguments(argv=None):
    """Parse command line arguments with smart defaults."""
    parser = argparse.ArgumentParser(
        description="Intersect two 3D line segments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the built-in example
  %(prog)s

  # Intersect the segments of a YAML job
  %(prog)s --input crossing.yaml

  # Override tolerance and choose the output file
  %(prog)s --input crossing.yaml --tolerance 1e-3 --output result.json

  # Verbose output
  %(prog)s --input crossing.yaml --verbose
        """
    )

    parser.add_argument(
        '--input', '-i',
        type=str,
        default=None,
        help='Input YAML crossing job (default: run the built-in example)'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default=None,
        help='Output JSON file (default: auto-generated in generated/)'
    )

    parser.add_argument(
        '--tolerance', '-t',
        type=float,
        default=None,
        help='Override the tolerance of the job or the built-in example (default: from YAML, or 1e-6)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Print detailed information during intersection'
    )

    return parser.parse_args(argv)


def format_point(point):
    """Format point coordinates separated by spaces."""
    return f"{point.x:g} {point.y:g} {point.z:g}"


def run_example(tolerance=DEFAULT_TOLERANCE):
    """Intersect the two fixed example segments and print the point."""
    segment1 = LineSegment(Point(3, 0, 1e-7), Point(1, 0, 0))
    segment2 = LineSegment(Point(0, 1, 0), Point(0, 4, 0))

    try:
        point = intersect(segment1, segment2, tolerance)
    except NoIntersectionError:
        print("Segments do not intersect")
        return
    print(format_point(point))


def main(argv=None):
    """Orchestrate loading, intersecting, and exporting of a crossing job."""
    args = parse_arguments(argv)

    try:
        if args.input is None:
            if args.tolerance is None:
                run_example()
            else:
                run_example(args.tolerance)
            return 0

        # Load Configuration
        if args.verbose:
            print(f"Loading crossing job from: {args.input}")

        crossing = path_utils.load_crossing_job(args.input)

        if args.tolerance is not None:
            crossing.tolerance = args.tolerance

        if args.verbose:
            for name, line in (('A', crossing.segment_a), ('B', crossing.segment_b)):
                print(f"  Segment {name}:")
                print(f"    Start: [{line.start.x:.3f}, {line.start.y:.3f}, {line.start.z:.3f}]")
                print(f"    End:   [{line.end.x:.3f}, {line.end.y:.3f}, {line.end.z:.3f}]")
            print(f"  Tolerance: {crossing.tolerance:g}")
            print()

        # Intersect
        if crossing.solve():
            print(format_point(crossing.point))
        else:
            print("Segments do not intersect")

        # Export to JSON
        if args.output is None:
            output_path = path_utils.auto_generate_output_path(args.input)
            if args.verbose:
                print(f"Auto-generated output path: {output_path}")
        else:
            output_path = Path(args.output)

        metadata = {
            'input_file': str(Path(args.input).resolve()),
            'tolerance': crossing.tolerance,
        }

        path_utils.export_to_json(crossing, output_path, metadata)

        if args.verbose:
            print(f"Wrote result to: {output_path}")

        return 0

    except FileNotFoundError as e:
        print(f"ERROR: {e}")
        return 1
    except ValueError as e:
        print(f"ERROR: Invalid configuration - {e}")
        return 1
    except Exception as e:
        print(f"ERROR: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
