"""Main CLI entry point with command routing."""

import sys


def main() -> None:
    """Main CLI entry point."""
    try:
        from termenv.cli.app import create_app
        app = create_app()
    except ImportError:
        # Minimal fallback without typer
        _fallback_main()
        return
    app()


def _fallback_main() -> None:
    """Minimal CLI when typer is not installed."""
    args = sys.argv[1:]

    if not args or args[0] in ("-h", "--help"):
        print("termenv - terminal color detection and styling")
        print()
        print("Install CLI extras for full functionality:")
        print("  uv pip install termenv[cli]")
        print()
        print("Basic usage (library mode):")
        print("  python -c \"import termenv; print(termenv.env_color_profile())\"")
        return

    if args[0] == "info":
        import termenv
        out = termenv.default_output()
        print(f"Color profile: {out.color_profile()}")
        print(f"Effective profile: {out.env_color_profile()}")
        return

    print(f"Unknown command: {args[0]}")
    print("Install CLI extras: uv pip install termenv[cli]")
    sys.exit(1)


if __name__ == "__main__":
    main()
