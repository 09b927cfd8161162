#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Binary -> Hilbert-ordered entropy image.

Pipeline:
- read the whole input file
- size the canvas: block count is the next power of 4 above len/16, so the
  side length is a power of two
- for every block index: slice the block, compute (entropy, average),
  place the pixel at the index's Hilbert curve coordinate
- encode the RGBA buffer as PNG and create the output file (never overwrites)

- Usable as a script or library:
    - analyze_data(data, ...) -> numpy (side, side, 4) uint8 buffer
    - generate_binvis(inputfile, outputfile, ...) -> Path

CLI:
    python -m binvis inputfile outputfile
    binvis inputfile outputfile --config binvis.yaml
"""

from __future__ import annotations

import argparse
import errno
import io
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Optional

import numpy as np
from PIL import Image
from tqdm.auto import tqdm

from binvis.blocks import BLOCK_SIZE, compute_geometry, get_block
from binvis.config import cfg_get, load_config
from binvis.errors import BinVisError, EmptyInputError, EncodingError
from binvis.hilbert import hilbert_d2xy
from binvis.stats import block_color

Reporter = Callable[[str, int], None]

# ----------------- reporting -----------------

def print_report(label: str, value: int) -> None:
    """Stdout reporter used by the CLI: 'Data: 123 bytes', 'Block size: 16', ..."""
    if label == "Data":
        print(f"{label}: {value} bytes")
    else:
        print(f"{label}: {value}")

# ----------------- assembly -----------------

def _fill(pixels: np.ndarray, data: bytes, sidelen: int, blocksize: int,
          start: int, stop: int) -> int:
    # each index owns exactly one pixel, so chunks never overlap
    for i in range(start, stop):
        x, y = hilbert_d2xy(sidelen, i)
        pixels[y, x] = block_color(get_block(data, i, blocksize))
    return stop - start

def _chunks(total: int, parts: int) -> list[tuple[int, int]]:
    step = max(1, -(-total // parts))
    return [(s, min(s + step, total)) for s in range(0, total, step)]

def analyze_data(data: bytes, blocksize: int = BLOCK_SIZE, workers: int = 1,
                 reporter: Optional[Reporter] = None, progress: bool = False) -> np.ndarray:
    """
    Build the pixel buffer for `data`.

    Args:
        data: whole input file
        blocksize: bytes per pixel (16 in the reference layout)
        workers: >1 splits the block range across a thread pool
        reporter: optional reporter(label, value) for the geometry diagnostics
        progress: show a tqdm bar on stderr

    Returns:
        uint8 array of shape (sidelen, sidelen, 4), indexed [y, x], RGBA
    """
    datalen = len(data)
    if datalen == 0:
        raise EmptyInputError()
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    if reporter is not None:
        reporter("Data", datalen)

    geo = compute_geometry(datalen, blocksize)

    if reporter is not None:
        reporter("Block size", geo.blocksize)
        reporter("Block count", geo.blockcount)
        reporter("Side length", geo.sidelen)

    pixels = np.zeros((geo.sidelen, geo.sidelen, 4), dtype=np.uint8)
    chunks = _chunks(geo.blockcount, max(workers * 4, 64))

    with tqdm(total=geo.blockcount, desc="blocks", unit="block",
              disable=not progress, file=sys.stderr, leave=False) as bar:
        if workers == 1:
            for start, stop in chunks:
                bar.update(_fill(pixels, data, geo.sidelen, geo.blocksize, start, stop))
        else:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                futures = [pool.submit(_fill, pixels, data, geo.sidelen, geo.blocksize, s, e)
                           for s, e in chunks]
                for fut in futures:
                    bar.update(fut.result())
    return pixels

# ----------------- encoding -----------------

def to_image(pixels: np.ndarray) -> Image.Image:
    return Image.fromarray(pixels)

def encode_png(img: Image.Image, compress_level: int = 6) -> bytes:
    buf = io.BytesIO()
    try:
        img.save(buf, format="PNG", optimize=False, compress_level=compress_level)
    except (OSError, ValueError) as e:
        raise EncodingError(f"PNG encoding failed: {e}") from e
    return buf.getvalue()

# ----------------- public API -----------------

def generate_binvis(inputfile, outputfile, cfg: Optional[dict] = None,
                    reporter: Optional[Reporter] = None) -> Path:
    """
    Convert one file into one PNG.

    Args:
        inputfile: file to analyze
        outputfile: PNG to create; must not exist yet
        cfg: config dict from load_config() (defaults when None)
        reporter: receives the geometry diagnostics

    Returns:
        Path of the written PNG.

    Raises:
        EmptyInputError, EncodingError, OSError (FileExistsError when the
        output is already there). Nothing is written on failure.
    """
    cfg = cfg if cfg is not None else load_config()
    in_path = Path(inputfile)
    out_path = Path(outputfile)

    # fail before doing any work; the exclusive open below is the real guard
    if out_path.exists():
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(out_path))

    data = in_path.read_bytes()
    pixels = analyze_data(data,
                          workers=cfg_get(cfg, "analysis.workers", 1),
                          reporter=reporter,
                          progress=cfg_get(cfg, "output.progress", False))
    png = encode_png(to_image(pixels), cfg_get(cfg, "output.compress_level", 6))

    with out_path.open("xb") as f:
        f.write(png)
    return out_path

# ---------------- CLI ----------------

class _UsageParser(argparse.ArgumentParser):
    """Argument errors print the full usage to stdout and exit 1."""

    def error(self, message):
        self.print_help(sys.stdout)
        self.exit(1)

def parse_args(argv=None):
    ap = _UsageParser(
        prog=Path(sys.argv[0]).name if argv is None else "binvis",
        description="Bin(Py)Vis: render a file as a Hilbert-ordered entropy/average image",
    )
    ap.add_argument("inputfile", help="Input file to analyze")
    ap.add_argument("outputfile", help="Output PNG image (must not exist)")
    ap.add_argument("--config", default=None, help="Optional YAML config (analysis/output settings)")
    return ap.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        cfg = load_config(args.config)
        generate_binvis(args.inputfile, args.outputfile, cfg=cfg, reporter=print_report)
    except (BinVisError, OSError) as e:
        print(e, file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
