"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from functools import reduce
from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the filtering pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as filtering progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, pattern, langcode, theme, syntax
        - env_check: inputFiles, envOK
        - sources_filter: filterResults
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing source HTML files
        outputdir: Base output directory for filtered files
        verbosity: Logging verbosity level (1-3)
        pattern: Glob (relative to inputdir) selecting files to filter
        langcode: Language code passed through to the filter
        theme: Optional filter-wide theme override
        syntax: Optional filter-wide syntax override
        envOK: Environment validation passed
        inputFiles: Resolved input files matched by pattern
        filterResults: One summary dict per filtered file
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    pattern: str = field(default="**/*.html")
    langcode: str = field(default="en")
    theme: Optional[str] = field(default=None)
    syntax: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputFiles: List[Path] = field(default_factory=list)
    filterResults: Optional[List[Dict[str, Any]]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (pattern, langcode, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for filtered output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        # Only keep options that are ProgramState fields
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(initial_state, env_check, sources_filter, results_report)

    This is equivalent to:
        results_report(sources_filter(env_check(initial_state)))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
