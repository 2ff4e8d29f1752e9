import json
import logging
import struct
import zlib
from array import array
from typing import Any, Dict, Tuple

from algoviz.core.grid import Grid

logger = logging.getLogger(__name__)


class MazeSerializer:
    MAGIC = b"MAZE"
    VERSION = 1

    # Flags
    FLAG_COMPRESSED = 1
    FLAG_SEED_ONLY = 2

    @staticmethod
    def save(grid: Grid, filepath: str, meta: Dict[str, Any] = None, seed_only=False, compress=False):
        """
        Saves the maze to a binary file.
        Format:
        - MAGIC (4 bytes)
        - VERSION (1 byte)
        - FLAGS (1 byte)
        - WIDTH (4 bytes)
        - HEIGHT (4 bytes)
        - META_LEN (2 bytes)
        - META_JSON (META_LEN bytes)
        - DATA_LEN (4 bytes, 0 if seed_only)
        - DATA (one byte per cell, Wall=0 / Path=1, compressed or raw)
        A seed-only file keeps just {"algo", "seed"} in META; the maze is rebuilt
        by replaying the generator.
        """
        if meta is None:
            meta = {}
        if seed_only and not all(key in meta for key in ("algo", "seed")):
            raise ValueError("seed-only files need 'algo' and 'seed' in meta")

        flags = 0
        if compress:
            flags |= MazeSerializer.FLAG_COMPRESSED
        if seed_only:
            flags |= MazeSerializer.FLAG_SEED_ONLY

        meta_bytes = json.dumps(meta).encode('utf-8')

        with open(filepath, "wb") as f:
            f.write(MazeSerializer.MAGIC)
            f.write(struct.pack(">BB", MazeSerializer.VERSION, flags))
            f.write(struct.pack(">II", grid.width, grid.height))
            f.write(struct.pack(">H", len(meta_bytes)))
            f.write(meta_bytes)

            if seed_only:
                f.write(struct.pack(">I", 0))
            else:
                data = grid.cells.tobytes()
                if compress:
                    data = zlib.compress(data)

                f.write(struct.pack(">I", len(data)))
                f.write(data)

        logger.debug("Saved %dx%d maze to %s (flags=%d)", grid.width, grid.height, filepath, flags)

    @staticmethod
    def load(filepath: str) -> Tuple[Grid, Dict[str, Any]]:
        with open(filepath, "rb") as f:
            magic = f.read(4)
            if magic != MazeSerializer.MAGIC:
                raise ValueError("Invalid file format")

            version, flags = struct.unpack(">BB", f.read(2))
            if version != MazeSerializer.VERSION:
                raise ValueError(f"Unsupported maze file version: {version}")
            width, height = struct.unpack(">II", f.read(8))
            meta_len = struct.unpack(">H", f.read(2))[0]
            meta = json.loads(f.read(meta_len).decode('utf-8'))

            grid = Grid(width, height)

            data_len = struct.unpack(">I", f.read(4))[0]

            if flags & MazeSerializer.FLAG_SEED_ONLY:
                # Caller re-runs meta['algo'] with meta['seed'];
                # this loader just returns the all-wall grid and metadata
                meta["seed_only"] = True
            elif data_len > 0:
                data = f.read(data_len)
                if flags & MazeSerializer.FLAG_COMPRESSED:
                    data = zlib.decompress(data)
                if len(data) != width * height:
                    raise ValueError("Cell data does not match maze dimensions")

                grid.cells = array('B', data)

            return grid, meta
