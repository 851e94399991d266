#!/usr/bin/env python3
"""
prexent - markdown slide deck parser

Parses a markdown deck with '!' directives into slides of typed blocks and
writes the result as JSON, ready for an HTML renderer.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Directives (one per line):
    !include <path>                  splice in another markdown file
    !code <path> [<lang> <runner>]   show a code sample loaded from a file
    !header / !footer / !comment <text...>
    !custom_css / !global_background / !slide_background <token>
    !slide_classes <token...>
    ---                              slide separator

Usage:
    prexent inputdir/ outputdir/ --inputFile deck.md

    The parsed slides are written to outputdir/ as slides.json.

Examples:
    # Basic parse
    prexent . output/ --inputFile deck.md

    # Custom output name, verbose
    prexent . output/ --inputFile deck.md --outputFile talk.json -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Parser, DirectiveRegistry, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline, slides_toJSON, Error, DirectiveCategory


DISPLAY_TITLE = r"""
                                 _
  _ __  _ __ _____  _____ _ __ | |_
 | '_ \| '__/ _ \ \/ / _ \ '_ \| __|
 | |_) | | |  __/>  <  __/ | | | |_
 | .__/|_|  \___/_/\_\___|_| |_|\__|
 |_|
  Markdown slide deck parser
"""

# Define CLI arguments
parser = ArgumentParser(
    description="prexent - markdown slide deck parser",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Root markdown deck (relative to inputdir)"
)

parser.add_argument(
    "--outputFile",
    default=None,
    type=str,
    help=f"JSON output filename within outputdir (default: {appsettings.output_file})",
)

parser.add_argument(
    "--listDirectives",
    action="store_true",
    default=False,
    help="Print the supported directives before parsing",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def directives_print() -> None:
    """Print one usage line per registered directive, grouped by category"""
    registry = DirectiveRegistry()
    for category in DirectiveCategory:
        print(f"{category.value}:")
        for spec in registry.directives_listByCategory(category):
            print(f"  {spec.usage()}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the root markdown file
            - jsonOutputFile: Path of the JSON file to write
            - envOK: True if environment is valid

    Exits:
        1 if the input file is not found
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    state.jsonOutputFile = state.outputdir / (state.outputFile or appsettings.output_file)
    LOG(f"Output file: {state.jsonOutputFile}", level=2)

    state.envOK = True
    return state


def source_parse(inputstate: ProgramState) -> ProgramState:
    """
    Parse the root markdown file into slides.

    Problems inside the deck (missing includes, bad directives) are kept as
    error blocks and only reported; they do not stop the pipeline.

    Args:
        inputstate: Program state with inputSourceFile path set

    Returns:
        ProgramState with added field:
            - parsedSlides: ParseResult for the deck
    """
    state = inputstate.copy()

    LOG("Parsing deck...", level=1)
    state.parsedSlides = Parser().parse(str(state.inputSourceFile))

    errors = [block for slide in state.parsedSlides for block in slide if isinstance(block, Error)]
    for error in errors:
        LOG(f"Error block: {error.content}", level=1)
    LOG(f"Parsed {len(state.parsedSlides)} slides ({len(errors)} error blocks)", level=2)
    return state


def results_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the parsed slides as JSON.

    Args:
        inputstate: Program state with parsedSlides and jsonOutputFile

    Returns:
        ProgramState with added field:
            - writtenFile: Path of the JSON file

    Exits:
        1 if parsedSlides is None or the file cannot be written
    """
    state = inputstate.copy()

    if state.parsedSlides is None:
        print("Error: No parsed slides available", file=sys.stderr)
        sys.exit(1)

    try:
        state.jsonOutputFile.write_text(slides_toJSON(state.parsedSlides) + "\n", encoding="utf-8")
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        sys.exit(1)

    state.writtenFile = state.jsonOutputFile
    LOG(f"Wrote {state.writtenFile}", level=2)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display results to user.

    Args:
        inputstate: Program state with writtenFile populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if nothing was written
    """
    state: ProgramState = inputstate.copy()
    if not state.writtenFile:
        print("Error: Parsing failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Parse successful!", level=1)
    LOG(f"  Output: {state.writtenFile}", level=1)
    LOG(f"  Slides: {len(state.parsedSlides or [])}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="prexent - markdown slide deck parser",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - parse a markdown deck into slides.json.

    Orchestrates the pipeline:
        1. env_check: Validate paths and environment
        2. source_parse: Parse the deck into slides
        3. results_write: Write the slides as JSON
        4. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
        inputdir: Directory containing the markdown deck
        outputdir: Directory where the JSON will be written
    """
    if options.listDirectives:
        directives_print()

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )
    if appsettings.debug_mode:
        state.verbosity = max(state.verbosity, 3)

    state_connectToLogger(state)

    pipeline(state, env_check, source_parse, results_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
