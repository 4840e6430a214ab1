import binascii
import random
import unittest

from terra_bases import base16

from support import IsolatedConfigTestCase


class TestBase16(IsolatedConfigTestCase):
    def test_rfc4648_vectors(self) -> None:
        vectors = {
            "": "",
            "f": "66",
            "fo": "666F",
            "foo": "666F6F",
            "foob": "666F6F62",
            "fooba": "666F6F6261",
            "foobar": "666F6F626172",
        }
        for plain, encoded in vectors.items():
            self.assertEqual(base16.encode(plain), encoded)
            self.assertEqual(base16.decode(encoded), plain.encode("ascii"))

    def test_encode_accepts_octets(self) -> None:
        self.assertEqual(base16.encode(b"\xff"), "FF")
        self.assertEqual(base16.encode(bytearray([0xFF, 0x80])), "FF80")
        self.assertEqual(base16.encode([0x66, 0x6F]), "666F")
        self.assertEqual(base16.encode(memoryview(b"foobar")), "666F6F626172")

    def test_decode_is_case_insensitive(self) -> None:
        self.assertEqual(base16.decode("666f6f626172"), b"foobar")
        self.assertEqual(base16.decode("666F6f626172"), b"foobar")

    def test_decode_skips_noise(self) -> None:
        self.assertEqual(base16.decode("6 66.f"), b"fo")
        self.assertEqual(base16.decode("666;f6 f' 62"), b"foob")
        self.assertEqual(base16.decode("6. 66f#6f&62;61!72"), b"foobar")
        self.assertEqual(base16.decode("66\n6F\r\n6F"), b"foo")

    def test_decode_rejects_odd_digit_count(self) -> None:
        self.assertEqual(base16.decode("FF80F"), b"")
        self.assertEqual(base16.decode("F"), b"")
        self.assertEqual(base16.decode("FF80"), b"\xff\x80")

    def test_decode_bytes_input(self) -> None:
        self.assertEqual(base16.decode(b"666F6F"), b"foo")

    def test_pangram(self) -> None:
        text = "The quick brown fox jumps over the lazy dog"
        expected = (
            "54686520717569636B2062726F776E20666F78206A756D7073206F766572"
            "20746865206C617A7920646F67"
        )
        self.assertEqual(base16.encode(text), expected)
        self.assertEqual(base16.decode(expected.lower()), text.encode("ascii"))

    def test_random_roundtrip(self) -> None:
        rng = random.Random(16)
        for length in range(0, 200, 7):
            data = bytes(rng.randrange(256) for _ in range(length))
            encoded = base16.encode(data)
            self.assertEqual(encoded, binascii.hexlify(data).decode("ascii").upper())
            self.assertEqual(base16.decode(encoded), data)

    def test_rejects_non_octet_input(self) -> None:
        with self.assertRaises(TypeError):
            base16.encode(5)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            base16.decode(None)  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
