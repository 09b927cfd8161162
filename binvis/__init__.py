"""
Binary file visualizer.

Turns a file into a square PNG where every 16-byte block becomes one pixel:
- red   : Shannon entropy of the block (scaled by 32)
- green : average byte value of the block
Blocks are laid out along a Hilbert curve so neighbours in the file stay
neighbours in the picture.
"""

__version__ = "1.0.0"

from binvis.blocks import BLOCK_SIZE, CanvasGeometry, compute_geometry, get_block, get_block_count
from binvis.convert import analyze_data, generate_binvis, to_image
from binvis.errors import BinVisError, ConfigError, EmptyInputError, EncodingError
from binvis.hilbert import hilbert_d2xy, hilbert_points
from binvis.stats import block_color, get_average, get_entropy, shannon_entropy
