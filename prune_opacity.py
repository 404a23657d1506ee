"""
Prune a 3D Gaussian Splatting .ply file by opacity at 10/20/30/40/50%.

Example usage:
python prune_opacity.py scene.ply pruned/

Writes pruned/scene_pruned_opacity_<P>.ply for each level.
"""

import argparse
import sys

from splatprune import PruneConfig, PruneError, UsageError, run_pruning


class _ArgumentParser(argparse.ArgumentParser):
  def error(self, message):
    raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
  parser = _ArgumentParser(
      prog="prune_opacity",
      description="Write copies of a Gaussian splat .ply with the least opaque splats removed.")
  parser.add_argument("input_file", help="Path to the input 3D Gaussian splatting .ply file")
  parser.add_argument("output_directory", help="Directory for the pruned .ply files (created if missing)")
  return parser


def main(argv=None) -> int:
  parser = build_parser()
  try:
    args = parser.parse_args(argv)
  except UsageError as e:
    print(parser.format_usage().strip(), file=sys.stderr)
    print(f"Error: {e}", file=sys.stderr)
    return 1

  try:
    run_pruning(PruneConfig(args.input_file, args.output_directory))
  except (PruneError, OSError) as e:
    print(f"Error: {e}", file=sys.stderr)
    return 1

  print("Done!")
  return 0


if __name__ == "__main__":
  sys.exit(main())
