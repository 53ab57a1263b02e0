#!/usr/bin/env python3
"""
ace_editor - filter HTML documents for inline <ace> code editors

Every file matched in inputdir is run through the <ace> directive filter
within its own render scope. The filtered document is written to the same
relative path under outputdir; when it contained directives, a companion
<name>.ace.json holds the libraries to load and the editor manifest for the
front-end script.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Usage:
    ace_editor inputdir/ outputdir/ [--pattern '**/*.html']

Examples:
    # Filter every HTML file
    ace_editor pages/ out/

    # Only markdown exports, with a different default theme
    ace_editor pages/ out/ --pattern '*.md.html' --theme monokai

    # Verbose output
    ace_editor pages/ out/ -vv
"""

import json
import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import Any, Dict

from chris_plugin import chris_plugin
from .lib import AceFilter, ConfigError, render_scope, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


# Define CLI arguments
parser = ArgumentParser(
    description="ace_editor - replace inline <ace> directives with embedded code editors",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--pattern",
    default="**/*.html",
    type=str,
    help="Glob (relative to inputdir) selecting the files to filter",
)

parser.add_argument(
    "--langcode",
    default="en",
    type=str,
    help="Language code passed to the filter",
)

parser.add_argument(
    "--theme",
    default=None,
    type=str,
    help="Default editor theme for directives without a theme attribute",
)

parser.add_argument(
    "--syntax",
    default=None,
    type=str,
    help="Default editor syntax for directives without a syntax attribute",
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
    Validate the input directory and collect the files to filter.

    Returns:
        ProgramState with added fields:
            - inputFiles: Sorted files under inputdir matching pattern
            - envOK: True if environment is valid

    Exits:
        1 if inputdir doesn't exist
    """
    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    if state.inputdir is None or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputFiles = sorted(p for p in state.inputdir.glob(state.pattern) if p.is_file())
    LOG(f"Matched {len(state.inputFiles)} file(s) with '{state.pattern}'", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def file_filter(ace_filter: AceFilter, input_file: Path, state: ProgramState) -> Dict[str, Any]:
    """
    Filter one file inside its own render scope and write the results.

    Returns:
        Summary dict with input_file, output_file, manifest_file (or None)
        and the number of editor instances found
    """
    output_file = state.outputdir / input_file.relative_to(state.inputdir)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    source = input_file.read_text(encoding="utf-8")

    with render_scope() as context:
        result = ace_filter.process(source, state.langcode)
        output_file.write_text(result.text, encoding="utf-8")

        manifest_file = None
        instances = 0
        if context.manifest is not None:
            instances = len(context.manifest.instances)
            manifest_file = output_file.parent / f"{output_file.stem}.ace.json"
            payload = {
                "libraries": context.manifest.attached_libraries,
                "ace_filter": context.manifest.js_settings(),
            }
            manifest_file.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    LOG(f"{input_file.name}: {instances} editor(s)", level=2)

    return {
        "input_file": str(input_file),
        "output_file": str(output_file),
        "manifest_file": str(manifest_file) if manifest_file else None,
        "instances": instances,
    }


def sources_filter(inputstate: ProgramState) -> ProgramState:
    """
    Run the <ace> filter over every input file.

    Returns:
        ProgramState with added field:
            - filterResults: One summary dict per input file

    Exits:
        1 if the configuration can't be loaded or a file can't be read/written
    """
    state = inputstate.copy()

    LOG("Filtering sources...", level=1)

    overrides = {key: value for key, value in (("theme", state.theme), ("syntax", state.syntax)) if value}
    try:
        ace_filter = AceFilter(settings=overrides)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    results = []
    for input_file in state.inputFiles:
        try:
            results.append(file_filter(ace_filter, input_file, state))
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error filtering {input_file}: {e}", file=sys.stderr)
            sys.exit(1)

    state.filterResults = results
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display a summary of the filtered files.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if filterResults is None
    """
    state: ProgramState = inputstate.copy()
    if state.filterResults is None:
        print("Error: Filtering failed", file=sys.stderr)
        sys.exit(1)

    editors = sum(result["instances"] for result in state.filterResults)
    LOG("\n✓ Filtering complete!", level=1)
    LOG(f"  Files:   {len(state.filterResults)}", level=1)
    LOG(f"  Editors: {editors}", level=1)
    LOG(f"  Output:  {state.outputdir}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="ace_editor - inline code editor filter",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - filter <ace> directives in every matched file.

    Orchestrates the pipeline:
        1. env_check: Validate inputdir and collect files
        2. sources_filter: Filter each file in its own render scope
        3. results_report: Display results to user
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, sources_filter, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
