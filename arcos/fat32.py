"""A minimal FAT32 reader and writer working on a sector device."""

from __future__ import annotations

import struct
from dataclasses import dataclass

SECTOR_SIZE = 512
MAX_PARTITIONS = 4
MAX_FILENAME = 12
MAX_FILES = 64

_PARTITION_TABLE = 0x1BE
_PARTITION_ENTRY = struct.Struct("<4xB3xII")
_FAT32_TYPES = (0x0B, 0x0C)
_MAX_CLUSTER_BYTES = 4096
_DIR_ENTRY_SIZE = 32
_END_OF_CHAIN = 0x0FFFFFF8
_DELETED = 0xE5
_ATTR_LFN = 0x0F
_ATTR_DIR = 0x10
_ATTR_ARCHIVE = 0x20


class Fat32Error(Exception):
    """Raised when a device access or a filesystem operation fails."""


class MemoryDisk:
    """A sector device held in memory."""

    def __init__(self, sectors: int) -> None:
        self._sectors = [bytes(SECTOR_SIZE)] * sectors

    def __len__(self) -> int:
        return len(self._sectors)

    def _check(self, lba: int) -> None:
        if not 0 <= lba < len(self._sectors):
            raise Fat32Error(f"sector {lba} is outside the disk")

    def read_sector(self, lba: int) -> bytes:
        self._check(lba)
        return self._sectors[lba]

    def write_sector(self, lba: int, data) -> None:
        """Store one sector; shorter data is padded with zeros."""
        self._check(lba)
        data = bytes(data)
        if len(data) > SECTOR_SIZE:
            raise Fat32Error(f"sector data longer than {SECTOR_SIZE} bytes")
        self._sectors[lba] = data.ljust(SECTOR_SIZE, b"\x00")


@dataclass(frozen=True)
class Partition:
    lba_start: int
    sectors: int


@dataclass(frozen=True)
class DirEntry:
    name: str
    first_cluster: int
    size: int
    is_dir: bool


@dataclass(frozen=True)
class _Layout:
    bytes_per_sector: int
    sectors_per_cluster: int
    fat_begin_lba: int
    cluster_begin_lba: int
    root_dir_first_cluster: int

    @property
    def cluster_bytes(self) -> int:
        return self.bytes_per_sector * self.sectors_per_cluster

    def cluster_lba(self, cluster: int) -> int:
        return self.cluster_begin_lba + (cluster - 2) * self.sectors_per_cluster


def _entry_name(raw: bytes) -> str:
    text = raw.decode("latin-1").replace(" ", "\x00")
    return text.split("\x00", 1)[0]


class Fat32:
    """FAT32 volumes found in a device's MBR: root directory only, 8.3 names."""

    def __init__(self, device) -> None:
        self.device = device
        self.partitions: list[Partition] = []
        self._layout: _Layout | None = None

    def detect_partitions(self) -> list[Partition]:
        """Read the MBR and record its FAT32 partitions."""
        self.partitions = []
        mbr = self.device.read_sector(0)
        table = mbr[_PARTITION_TABLE:_PARTITION_TABLE + MAX_PARTITIONS * _PARTITION_ENTRY.size]
        for part_type, lba_start, sectors in _PARTITION_ENTRY.iter_unpack(table):
            if part_type in _FAT32_TYPES:
                self.partitions.append(Partition(lba_start, sectors))
        return list(self.partitions)

    def _partition(self, part_idx: int) -> Partition:
        if not 0 <= part_idx < len(self.partitions):
            raise Fat32Error(f"no partition {part_idx}")
        return self.partitions[part_idx]

    def _require_layout(self) -> _Layout:
        if self._layout is None:
            raise Fat32Error("no partition is mounted")
        return self._layout

    def mount(self, part_idx: int) -> None:
        """Read a partition's boot sector and make it the active volume."""
        part_lba = self._partition(part_idx).lba_start
        bpb = self.device.read_sector(part_lba)
        (bytes_per_sector,) = struct.unpack_from("<H", bpb, 11)
        sectors_per_cluster = bpb[13]
        (reserved,) = struct.unpack_from("<H", bpb, 14)
        num_fats = bpb[16]
        (fat_size,) = struct.unpack_from("<I", bpb, 36)
        (root_cluster,) = struct.unpack_from("<I", bpb, 44)
        cluster_bytes = bytes_per_sector * sectors_per_cluster
        if not 0 < cluster_bytes <= _MAX_CLUSTER_BYTES:
            raise Fat32Error(f"unsupported cluster size {cluster_bytes}")
        fat_begin = part_lba + reserved
        self._layout = _Layout(
            bytes_per_sector=bytes_per_sector,
            sectors_per_cluster=sectors_per_cluster,
            fat_begin_lba=fat_begin,
            cluster_begin_lba=fat_begin + num_fats * fat_size,
            root_dir_first_cluster=root_cluster,
        )

    def _read_cluster(self, layout: _Layout, cluster: int) -> bytes:
        start = layout.cluster_lba(cluster)
        return b"".join(
            self.device.read_sector(start + i)[:layout.bytes_per_sector]
            for i in range(layout.sectors_per_cluster)
        )

    def list_dir(self, max_files: int = MAX_FILES) -> list[DirEntry]:
        """Entries of the root directory, skipping deleted and long-name entries."""
        layout = self._require_layout()
        cluster = self._read_cluster(layout, layout.root_dir_first_cluster)
        entries: list[DirEntry] = []
        for offset in range(0, len(cluster) - _DIR_ENTRY_SIZE + 1, _DIR_ENTRY_SIZE):
            entry = cluster[offset:offset + _DIR_ENTRY_SIZE]
            if entry[0] == 0x00:
                break
            if entry[0] == _DELETED:
                continue
            attr = entry[11]
            if attr & 0x0F == _ATTR_LFN:
                continue
            high, low = struct.unpack_from("<H", entry, 20)[0], struct.unpack_from("<H", entry, 26)[0]
            (size,) = struct.unpack_from("<I", entry, 28)
            entries.append(
                DirEntry(
                    name=_entry_name(entry[:11]),
                    first_cluster=(high << 16) | low,
                    size=size,
                    is_dir=bool(attr & _ATTR_DIR),
                )
            )
            if len(entries) >= max_files:
                break
        return entries

    def read_file(self, name: str, maxlen: int) -> bytes:
        """Contents of a root-directory file, following its cluster chain, at most ``maxlen`` bytes."""
        for entry in self.list_dir(MAX_FILES):
            if not entry.is_dir and entry.name[:MAX_FILENAME] == name[:MAX_FILENAME]:
                return self._read_chain(entry, maxlen)
        raise Fat32Error(f"file not found: {name}")

    def _read_chain(self, entry: DirEntry, maxlen: int) -> bytes:
        layout = self._require_layout()
        bps = layout.bytes_per_sector
        out = bytearray()
        cluster = entry.first_cluster
        remaining = entry.size
        while remaining > 0 and len(out) < maxlen:
            data = self._read_cluster(layout, cluster)
            to_copy = min(remaining, layout.cluster_bytes, maxlen - len(out))
            out += data[:to_copy]
            remaining -= to_copy
            fat_offset = cluster * 4
            fat_sector = self.device.read_sector(layout.fat_begin_lba + fat_offset // bps)
            (cluster,) = struct.unpack_from("<I", fat_sector, fat_offset % bps)
            cluster &= 0x0FFFFFFF
            if cluster >= _END_OF_CHAIN:
                break
        return bytes(out)

    def format(self, part_idx: int) -> None:
        """Write a minimal FAT32 boot sector: 512-byte sectors, 8 per cluster, 2 FATs."""
        partition = self._partition(part_idx)
        sector = bytearray(SECTOR_SIZE)
        struct.pack_into("<H", sector, 0x0B, 512)
        sector[0x0D] = 8
        struct.pack_into("<H", sector, 0x0E, 1)
        sector[0x10] = 2
        sector[0x15] = 0xF8
        struct.pack_into("<H", sector, 0x18, 32)
        struct.pack_into("<H", sector, 0x1A, 64)
        struct.pack_into("<I", sector, 0x20, partition.sectors & 0xFFFFFFFF)
        struct.pack_into("<I", sector, 0x24, 128)
        struct.pack_into("<I", sector, 0x2C, 2)
        sector[0x40] = 0x29
        self.device.write_sector(partition.lba_start, bytes(sector))

    def write_file(self, part_idx: int, name: str, data) -> None:
        """Write up to one cluster of data to cluster 2 and add a root entry for it."""
        self._partition(part_idx)
        layout = self._require_layout()
        bps = layout.bytes_per_sector
        cluster = 2
        payload = bytes(data)[:layout.cluster_bytes]
        buffer = payload.ljust(layout.cluster_bytes, b"\x00")
        cluster_lba = layout.cluster_lba(cluster)
        for s in range(layout.sectors_per_cluster):
            self.device.write_sector(cluster_lba + s, buffer[s * bps:(s + 1) * bps])

        directory = bytearray(self.device.read_sector(cluster_lba))
        for k in range(0, SECTOR_SIZE, _DIR_ENTRY_SIZE):
            if directory[k] in (0x00, _DELETED):
                directory[k:k + _DIR_ENTRY_SIZE] = bytes(_DIR_ENTRY_SIZE)
                encoded = name.encode("latin-1").split(b"\x00", 1)[0][:11]
                directory[k:k + len(encoded)] = encoded
                directory[k + 11] = _ATTR_ARCHIVE
                struct.pack_into("<H", directory, k + 20, cluster >> 16)
                struct.pack_into("<H", directory, k + 26, cluster & 0xFFFF)
                struct.pack_into("<I", directory, k + 28, len(payload))
                break
        self.device.write_sector(cluster_lba, bytes(directory))