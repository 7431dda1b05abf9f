"""Command-line interface for sentence segmentation and configuration checks."""

import argparse
import sys
import json
from pathlib import Path

import yaml

from sentseg.lexicon.loader import LexiconLoadError, YamlAbbreviationLexicon, load_lexicon
from sentseg.profiles.loader import ProfileLoadError, default_profiles, load_profiles
from sentseg.runtime.segmenter import Segmenter


class SimpleConsoleLogger:
    """Simple stderr logger used with --verbose."""

    def _emit(self, level: str, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"{level}: {msg} {details}" if details else f"{level}: {msg}", file=sys.stderr)

    def info(self, msg: str, **kv):
        self._emit("INFO", msg, **kv)

    def warn(self, msg: str, **kv):
        self._emit("WARN", msg, **kv)

    def error(self, msg: str, **kv):
        self._emit("ERROR", msg, **kv)


def _read_input(args):
    if args.file:
        path = Path(args.file)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")
        return path.read_text(encoding="utf-8")
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def segment_command(args):
    """Segment text from an argument, a file, or stdin."""
    try:
        text = _read_input(args)

        profiles = load_profiles(args.profiles) if args.profiles else None
        lexicon = None
        if args.lexicon:
            lexicon = YamlAbbreviationLexicon.from_files(args.lexicon)

        cleaner = list_guard = None
        if args.clean:
            from sentseg.preprocess.cleaner import WhitespaceCleaner
            from sentseg.preprocess.lists import NumberedListGuard
            cleaner = WhitespaceCleaner()
            list_guard = NumberedListGuard()

        segmenter = Segmenter(
            language=args.language,
            doc_type=args.doc_type,
            profiles=profiles,
            lexicon=lexicon,
            cleaner=cleaner,
            list_guard=list_guard,
            logger=SimpleConsoleLogger() if args.verbose else None,
        )
        sentences = segmenter.segment(text)

        if args.json:
            print(json.dumps(sentences, ensure_ascii=False, indent=2))
        else:
            for sentence in sentences:
                print(sentence)
        return 0

    except (ProfileLoadError, LexiconLoadError) as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1


def validate_command(args):
    """Validate a language profile table or an abbreviation lexicon file."""
    try:
        path = Path(args.config_file)
        if not path.exists():
            print(f"Error: File not found: {path}")
            return 1

        kind = args.kind
        if kind is None:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
            kind = "lexicon" if isinstance(data, dict) and "abbreviations" in data else "profiles"

        print(f"Validating {kind}: {path}")
        if kind == "lexicon":
            lexicon = load_lexicon(path)
            groups = lexicon.abbreviations
            print("✅ Lexicon validation successful!")
            print(f"   Language: {lexicon.language}")
            print(f"   Entries: prefix={len(groups.prefix)}, number={len(groups.number)}, plain={len(groups.plain)}")
            if args.verbose:
                print("\nEntries:")
                for entry in lexicon.entries():
                    print(f"   {entry.token}. ({entry.category})")
        else:
            table = load_profiles(path)
            print("✅ Profile validation successful!")
            print(f"   Version: {table.version}")
            print(f"   Languages: {len(table.codes)}")
            print(f"   Default terminals: {' '.join(table.default.terminals)}")
            if args.verbose:
                print("\nLanguages:")
                for code in table.codes:
                    print(f"   {code}: {' '.join(table.get(code).terminals)}")

        return 0

    except (ProfileLoadError, LexiconLoadError) as e:
        print(f"❌ Validation failed: {e}")
        return 1
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        return 1


def languages_command(args):
    """List configured languages with their terminal punctuation."""
    table = default_profiles()
    lexicon = YamlAbbreviationLexicon()
    print("Configured languages:")
    for code in table.codes:
        profile = table.get(code)
        entries = len(lexicon.entries(code))
        print(f"   {code}: {' '.join(profile.terminals)}  (abbreviations: {entries})")
    return 0


def info_command(args):
    """Display sentseg version and system information."""
    print("sentseg CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("sentseg")
        print(f"Version: {version}")
    except Exception:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nOptional dependencies:")

    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sentseg",
        description="Rule-based multilingual sentence segmentation"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Segment command
    segment_parser = subparsers.add_parser(
        "segment",
        help="Split text into sentences"
    )
    segment_parser.add_argument(
        "text",
        nargs="?",
        help="Text to segment (default: read --file or stdin)"
    )
    segment_parser.add_argument(
        "-f", "--file",
        help="Read text from a UTF-8 file"
    )
    segment_parser.add_argument(
        "-l", "--language",
        default="en",
        help="Two-letter language code (default: en)"
    )
    segment_parser.add_argument(
        "--doc-type",
        help="Document-type hint passed to the cleaner (e.g. pdf)"
    )
    segment_parser.add_argument(
        "--clean",
        action="store_true",
        help="Normalize whitespace and protect list markers first"
    )
    segment_parser.add_argument(
        "--profiles",
        help="Use a custom language profile YAML file"
    )
    segment_parser.add_argument(
        "--lexicon",
        action="append",
        help="Add an abbreviation lexicon YAML file (repeatable)"
    )
    segment_parser.add_argument(
        "--json",
        action="store_true",
        help="Print sentences as a JSON array"
    )
    segment_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log pipeline events to stderr"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a profile table or lexicon YAML file"
    )
    validate_parser.add_argument(
        "config_file",
        help="Path to the YAML file"
    )
    validate_parser.add_argument(
        "--kind",
        choices=["profiles", "lexicon"],
        help="File kind (default: detect from content)"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed validation results"
    )

    # Languages command
    subparsers.add_parser(
        "languages",
        help="List configured languages"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "segment":
        return segment_command(args)
    elif args.command == "validate":
        return validate_command(args)
    elif args.command == "languages":
        return languages_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
