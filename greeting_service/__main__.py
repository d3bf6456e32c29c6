"""Module execution entrypoint for `python -m greeting_service`."""

from greeting_service.main import main

if __name__ == "__main__":
    main()
