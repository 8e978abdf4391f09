"""Command-line interface for inspecting a_lm files and computing power spectra."""

import argparse
import logging
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from tqdm import tqdm

from . import config
from .file_ops import read_alm
from .logging_utils import setup_logging
from .plot import plot_cl
from .spectrum import alm2cl


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the a_lm tools."""
    parser = argparse.ArgumentParser(
        prog="python -m healpix_alm",
        description="Inspect spherical harmonic coefficient files and compute C_l",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    info = subparsers.add_parser(
        "info",
        help="Print lmax, mmax and size of coefficient files",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    info.add_argument("files", nargs="+", type=Path, help="FITS or text a_lm files")

    cl = subparsers.add_parser(
        "cl",
        help="Compute angular power spectra",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    cl.add_argument("files", nargs="+", type=Path, help="FITS or text a_lm files")
    cl.add_argument(
        "--cross",
        type=Path,
        default=None,
        help="Second field; computes cross-spectra of every input with it",
    )
    cl.add_argument(
        "--output",
        type=Path,
        default=Path(config.DEFAULT_CL_OUTPUT),
        help="Output file (.npz, otherwise plain text columns)",
    )
    cl.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="Optional image file for a plot of the spectra",
    )
    cl.add_argument(
        "--dl",
        action="store_true",
        help="Plot l(l+1) C_l / 2π instead of C_l",
    )
    return parser.parse_args(argv)


def _run_info(args: argparse.Namespace) -> int:
    for path in args.files:
        alm = read_alm(path)
        print(
            f"{path}: lmax={alm.lmax} mmax={alm.mmax} "
            f"n_alm={len(alm)} dtype={alm.dtype}"
        )
    return 0


def _save_spectra(output: Path, files: list[Path], spectra: np.ndarray) -> None:
    ell = np.arange(spectra.shape[1])
    if output.suffix.lower() == ".npz":
        np.savez(output, ell=ell, cl=spectra, files=np.array([str(f) for f in files]))
    else:
        header = " ".join(["ell"] + [f"cl_{i}" for i in range(len(files))])
        np.savetxt(output, np.column_stack([ell, spectra.T]), header=header)


def _run_cl(args: argparse.Namespace) -> int:
    other = read_alm(args.cross) if args.cross is not None else None

    spectra = []
    for path in tqdm(args.files, desc="Computing C_l", unit="file"):
        alm = read_alm(path)
        logging.debug("%s: lmax=%d mmax=%d", path, alm.lmax, alm.mmax)
        spectra.append(alm2cl(alm, other))

    lengths = {cl.size for cl in spectra}
    if len(lengths) > 1:
        logging.error("Inputs have different lmax values: %s", sorted(n - 1 for n in lengths))
        return 1

    stacked = np.vstack(spectra)
    _save_spectra(args.output, args.files, stacked)

    if args.plot is not None:
        fig, axes = plt.subplots(figsize=(7, 4))
        for path, cl in zip(args.files, stacked):
            plot_cl(cl, axes, label=path.name, dl=args.dl)
        fig.savefig(args.plot, dpi=150, bbox_inches="tight")
        plt.close(fig)

    kind = f"cross with {args.cross}" if args.cross is not None else "auto"
    print("\n" + "=" * 60)
    print("Angular Power Spectrum Summary")
    print("=" * 60)
    print(f"Inputs          : {len(args.files)}")
    print(f"Spectrum type   : {kind}")
    print(f"Max degree      : lmax = {stacked.shape[1] - 1}")
    print(f"\nSaved to: {args.output}")
    if args.plot is not None:
        print(f"Plot    : {args.plot}")
    print("=" * 60)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    handlers = {"info": _run_info, "cl": _run_cl}
    try:
        return handlers[args.command](args)
    except Exception as exc:
        logging.exception("Failed to run '%s': %s", args.command, exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
