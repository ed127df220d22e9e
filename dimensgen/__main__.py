"""Allow ``python -m dimensgen``."""

from dimensgen.main import main

if __name__ == "__main__":
    main()
