#!/usr/bin/env python3
"""
semdoc - Semantic document markup rendered to markdown and man pages

Renders a YAML document source into HTML-flavoured markdown and/or a ROFF
man page. Output files are only rewritten when their content changes, so
the command can regenerate committed documentation and, with --check, fail
CI when the committed copy is stale.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Usage:
    semdoc inputdir/ outputdir/ --inputFile tool.yaml

Examples:
    # Markdown and man page
    semdoc docs/ docs/ --inputFile tool.yaml

    # Only the man page, failing if it had to be regenerated
    semdoc docs/ docs/ --inputFile tool.yaml --outputFormat man --check

    # Verbose output
    semdoc docs/ out/ --inputFile tool.yaml -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Manpage, SourceError, source_loadFile, write_updated, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


OUTPUT_FORMATS = ("markdown", "man", "both")

# Define CLI arguments
parser = ArgumentParser(
    description="semdoc - render semantic documents to markdown and man pages",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input YAML document source (relative to inputdir)"
)

parser.add_argument(
    "--outputFormat",
    default="both",
    choices=OUTPUT_FORMATS,
    help="Which renderings to write",
)

parser.add_argument(
    "--outputSubdir",
    default=".",
    type=str,
    help="Subdirectory within outputdir for the rendered files",
)

parser.add_argument(
    "--check",
    action="store_true",
    default=False,
    help="Exit with an error if any output file had to be rewritten",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the YAML source
            - docOutputdir: Created output directory path
            - envOK: True if environment is valid

    Exits:
        1 if the input file is not found
    """
    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.docOutputdir = state.outputdir / state.outputSubdir
    state.docOutputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.docOutputdir}", level=2)

    state.envOK = True
    return state


def source_parse(inputstate: ProgramState) -> ProgramState:
    """
    Read the YAML source and build the document.

    Returns:
        ProgramState with added field:
            - parsedSource: LoadedSource (document and man metadata)

    Exits:
        1 if the source cannot be read or is invalid
    """
    state = inputstate.copy()

    LOG("Loading document source...", level=1)
    try:
        state.parsedSource = source_loadFile(state.inputSourceFile)
    except SourceError as e:
        print(f"Source error: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Document holds {len(state.parsedSource.document.buffer.labels)} fragments", level=2)
    return state


def doc_render(inputstate: ProgramState) -> ProgramState:
    """
    Render the document and write the requested output files.

    Returns:
        ProgramState with added field:
            - renderResult: Dict containing:
                - status: bool
                - files: list of written or checked paths
                - changed: list of paths whose content changed

    Exits:
        1 if a man page is requested without man metadata, or the document
        uses features ROFF output does not support
    """
    state = inputstate.copy()
    loaded = state.parsedSource
    stem = state.inputSourceFile.stem
    files = []
    changed = []

    def output_write(path: Path, content: str) -> None:
        files.append(str(path))
        if write_updated(path, content):
            changed.append(str(path))

    if state.outputFormat in ("markdown", "both"):
        LOG("Rendering markdown...", level=1)
        output_write(state.docOutputdir / f"{stem}.md", loaded.document.render_to_markdown())

    if state.outputFormat in ("man", "both"):
        if loaded.man is None:
            print("Error: man page output needs a 'man' mapping in the source", file=sys.stderr)
            sys.exit(1)
        LOG("Rendering man page...", level=1)
        page = Manpage(loaded.man.title, loaded.man.section, loaded.man.extra)
        try:
            roff = loaded.document.render_to_manpage(page)
        except NotImplementedError as e:
            print(f"Render error: {e}", file=sys.stderr)
            sys.exit(1)
        output_write(state.docOutputdir / f"{stem}.{loaded.man.section}", roff)

    state.renderResult = {'status': True, 'files': files, 'changed': changed}
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display rendering results.

    Exits:
        1 if renderResult is missing, or if --check (or strict mode) is on
        and any file changed
    """
    state: ProgramState = inputstate.copy()
    if not state.renderResult:
        print("Error: Rendering failed", file=sys.stderr)
        sys.exit(1)

    for path in state.renderResult['files']:
        status = "updated" if path in state.renderResult['changed'] else "unchanged"
        LOG(f"  {path}: {status}", level=1)

    if state.renderResult['changed'] and (state.check or appsettings.strict_mode):
        print(
            f"Error: {len(state.renderResult['changed'])} file(s) changed, commit the regenerated output",
            file=sys.stderr,
        )
        sys.exit(1)
    return state


@chris_plugin(
    parser=parser,
    title="semdoc - semantic document renderer",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render a YAML document source.

    Orchestrates the pipeline:
        1. env_check: Validate paths and environment
        2. source_parse: Load the YAML source into a Document
        3. doc_render: Render and write markdown / man page
        4. results_report: Display results, enforce --check

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, source_parse, doc_render, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
