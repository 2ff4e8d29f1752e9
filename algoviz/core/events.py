import struct
from typing import Iterator, List, Tuple

MAGIC = b"VIZLOG"

# Log kinds
KIND_SORT = 0x01
KIND_MAZE = 0x02

# Event Types
EVT_COMPARE = 0x01
EVT_SWAP = 0x02
EVT_SORTED = 0x03
EVT_CARVE = 0x04
EVT_FRAME = 0x05
EVT_SET = 0x06


class EventWriter:
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "wb")

    def write_sort_header(self, values: List[int]):
        # Magic + kind + length (4b) + one signed 8b value per slot
        self.file.write(MAGIC)
        self.file.write(struct.pack(">BI", KIND_SORT, len(values)))
        for v in values:
            self.file.write(struct.pack(">q", v))

    def write_maze_header(self, width: int, height: int):
        self.file.write(MAGIC)
        self.file.write(struct.pack(">BII", KIND_MAZE, width, height))

    def log_compare(self, a: int, b: int):
        self.file.write(struct.pack(">Bii", EVT_COMPARE, a, b))

    def log_swap(self, a: int, b: int, value_a: int, value_b: int = 0):
        # Values are what the slots hold AFTER the write, so replay needs no
        # knowledge of the algorithm
        self.file.write(struct.pack(">Biiqq", EVT_SWAP, a, b, value_a, value_b))

    def log_set(self, index: int, value: int):
        # Single-slot write that has no step of its own
        self.file.write(struct.pack(">Biq", EVT_SET, index, value))

    def log_sorted(self):
        self.file.write(struct.pack(">B", EVT_SORTED))

    def log_carve(self, x: int, y: int):
        # 'H' (unsigned short) is plenty for visualization-sized mazes
        self.file.write(struct.pack(">BHH", EVT_CARVE, x, y))

    def log_frame(self):
        self.file.write(struct.pack(">B", EVT_FRAME))

    def close(self):
        if self.file:
            self.file.close()
            self.file = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class EventReader:
    def __init__(self, filename: str):
        self.filename = filename
        self.file = open(filename, "rb")
        self.kind = 0
        self.width = 0
        self.height = 0
        self.initial_values: List[int] = []

    def read_header(self) -> int:
        magic = self.file.read(len(MAGIC))
        if magic != MAGIC:
            raise ValueError("Invalid event log file")
        self.kind = struct.unpack(">B", self.file.read(1))[0]

        if self.kind == KIND_SORT:
            n = struct.unpack(">I", self.file.read(4))[0]
            data = self.file.read(8 * n)
            self.initial_values = list(struct.unpack(f">{n}q", data))
        elif self.kind == KIND_MAZE:
            self.width, self.height = struct.unpack(">II", self.file.read(8))
        else:
            raise ValueError(f"Unknown event log kind: {self.kind}")
        return self.kind

    def stream_events(self) -> Iterator[Tuple[int, Tuple]]:
        while True:
            type_byte = self.file.read(1)
            if not type_byte:
                break

            type_code = ord(type_byte)

            if type_code == EVT_COMPARE:
                yield (type_code, struct.unpack(">ii", self.file.read(8)))

            elif type_code == EVT_SWAP:
                yield (type_code, struct.unpack(">iiqq", self.file.read(24)))

            elif type_code == EVT_SET:
                yield (type_code, struct.unpack(">iq", self.file.read(12)))

            elif type_code == EVT_CARVE:
                yield (type_code, struct.unpack(">HH", self.file.read(4)))

            elif type_code in (EVT_SORTED, EVT_FRAME):
                yield (type_code, ())

            else:
                raise ValueError(f"Corrupt event log: unknown event 0x{type_code:02x}")

    def close(self):
        if self.file:
            self.file.close()
            self.file = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
