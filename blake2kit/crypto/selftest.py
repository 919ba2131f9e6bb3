"""Known-answer and backend cross-check self-test.

Vectors come from RFC 7693 appendices A and B and the official BLAKE2 KAT
files. The cross-check compares the pure-Python engines against
:func:`~blake2kit.crypto.reference.reference_digest` at block boundaries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, List, Tuple

from ..config import Variant
from .blake2 import engine_for
from .errors import SelfTestError
from .reference import reference_digest

_LOGGER: Final = logging.getLogger(__name__)

_KAT_KEY_64 = bytes(range(64)).hex()
_KAT_KEY_32 = bytes(range(32)).hex()

# (variant, input hex, key hex, expected digest hex); digest length is implied.
KNOWN_ANSWERS: Tuple[Tuple[Variant, str, str, str], ...] = (
    (Variant.BLAKE2B, "", "",
     "786a02f742015903c6c6fd852552d272912f4740e15847618a86e217f71f5419"
     "d25e1031afee585313896444934eb04b903a685b1448b755d56f701afe9be2ce"),
    (Variant.BLAKE2B, b"abc".hex(), "",
     "ba80a53f981c4d0d6a2797b69f12f6e94c212f14685ac4b74b12bb6fdbffa2d1"
     "7d87c5392aab792dc252d5de4533cc9518d38aa8dbf1925ab92386edd4009923"),
    (Variant.BLAKE2B, "", "", "2e"),
    (Variant.BLAKE2B, "", "",
     "0e5751c026e543b2e8ab2eb06099daa1d1e5df47778f7787faab45cdf12fe3a8"),
    (Variant.BLAKE2B, "00", "",
     "03170a2e7597b7b7e3d84c05391d139a62b157e78786d8c082f29dcf4c111314"),
    (Variant.BLAKE2B, "00010203040506070809ff", "",
     "2abafe19cab8000c4d56c325408bbe6bb53cdae7abc194f13ed3a49b567292d6"),
    (Variant.BLAKE2B, "", _KAT_KEY_64,
     "10ebb67700b1868efb4417987acf4690ae9d972fb7a590c2f02871799aaa4786"
     "b5e996e8f0f4eb981fc214b005f42d2ff4233499391653df7aefcbc13fc51568"),
    (Variant.BLAKE2B, "00", _KAT_KEY_64,
     "961f6dd1e4dd30f63901690c512e78e4b45e4742ed197c3c5e45c549fd25f2e4"
     "187b0bc9fe30492b16b0d0bc4ef9b0f34c7003fac09a5ef1532e69430234cebd"),
    (Variant.BLAKE2B, bytes(range(193)).hex(), _KAT_KEY_64,
     "da24bede383666d563eeed37f6319baf20d5c75d1635a6ba5ef4cfa1ac95487e"
     "96f8c08af600aab87c986ebad49fc70a58b4890b9c876e091016daf49e1d322e"),
    (Variant.BLAKE2S, "", "",
     "69217a3079908094e11121d042354a7c1f55b6482ca1a51e1b250dfd1ed0eef9"),
    (Variant.BLAKE2S, b"abc".hex(), "",
     "508c5e8c327c14e2e1a72ba34eeb452f37458b209ed63a294d999b4c86675982"),
    (Variant.BLAKE2S, "", _KAT_KEY_32,
     "48a8997da407876b3d79c0d92325ad3b89cbb754d86ab71aee047ad345fd2c49"),
)


def paint_test_input(length: int) -> bytes:
    """Deterministic filler: little-endian 32-bit counter starting at 1, truncated."""

    buf = bytearray()
    counter = 1
    while len(buf) < length:
        take = min(4, length - len(buf))
        buf.extend(counter.to_bytes(4, "little")[:take])
        counter += 1
    return bytes(buf)


def boundary_lengths(block_size: int) -> List[int]:
    """Input lengths around the block seams that padding bugs tend to hit."""

    return [
        0,
        1,
        block_size - 1,
        block_size,
        block_size + 1,
        2 * block_size - 1,
        2 * block_size,
        2 * block_size + 1,
        5 * block_size + 7,
    ]


@dataclass
class SelfTestReport:
    """Outcome of :func:`run_selftest`."""

    passed: int = 0
    failures: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def record(self, label: str, expected: bytes, actual: bytes) -> None:
        if expected == actual:
            self.passed += 1
        else:
            self.failures.append(f"{label}: expected {expected.hex()}, got {actual.hex()}")


def run_selftest(*, cross_check: bool = True) -> SelfTestReport:
    """Run every known-answer vector and, optionally, the backend cross-check."""

    report = SelfTestReport()

    for variant, data_hex, key_hex, digest_hex in KNOWN_ANSWERS:
        expected = bytes.fromhex(digest_hex)
        actual = engine_for(variant).hash(bytes.fromhex(data_hex), bytes.fromhex(key_hex), len(expected))
        label = f"{variant.value} kat in={len(data_hex) // 2} key={len(key_hex) // 2} out={len(expected)}"
        report.record(label, expected, actual)

    if cross_check:
        for variant in Variant:
            engine = engine_for(variant)
            for length in boundary_lengths(engine.block_size):
                data = paint_test_input(length)
                report.record(
                    f"{variant.value} backend len={length}",
                    reference_digest(data, variant),
                    engine.hash(data),
                )

    if report.ok:
        _LOGGER.info("self-test passed (%d checks)", report.passed)
    else:
        for failure in report.failures:
            _LOGGER.error("self-test mismatch: %s", failure)
    return report


def check() -> None:
    """Run the self-test and raise on the first sign of trouble.

    Raises:
        SelfTestError: If any check fails.
    """

    report = run_selftest()
    if not report.ok:
        raise SelfTestError(f"{len(report.failures)} self-test check(s) failed: {report.failures[0]}")
