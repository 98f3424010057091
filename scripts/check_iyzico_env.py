import sys

sys.path.insert(0, ".")

from settings import missing_credentials, settings


def main() -> int:
    mode = (settings.IYZICO_MODE or "sandbox").strip().lower()
    missing = missing_credentials(mode)
    if not missing:
        print("All required IYZICO %s env vars are set." % mode)
        return 0
    print("Missing IYZICO %s env vars: %s" % (mode, ", ".join(missing)))
    return 2


if __name__ == "__main__":
    sys.exit(main())
