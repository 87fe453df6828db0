import base64
import sys

def main():
    if len(sys.argv) not in (2, 3):
        print("Usage: corrupt_one_bit.py <hash-token> [digest-byte-index]")
        raise SystemExit(2)

    token = sys.argv[1]
    if not token.startswith("u") or len(token) != 53:
        print("Not a 53-character HoloHash token.")
        raise SystemExit(2)

    b = bytearray(base64.urlsafe_b64decode(token[1:]))
    # Digest occupies bytes 3..35. Flip the low bit of one digest byte and
    # leave the embedded location untouched.
    idx = 3 + (int(sys.argv[2]) if len(sys.argv) == 3 else 0)
    if not 3 <= idx < 35:
        print("Digest byte index must be in 0..31.")
        raise SystemExit(2)
    b[idx] ^= 0x01
    print("u" + base64.urlsafe_b64encode(bytes(b)).decode("ascii").rstrip("="))

if __name__ == "__main__":
    main()
