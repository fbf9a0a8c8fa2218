"""Shared test fixtures for the cmdhelp test suite."""

import json
from pathlib import Path

import pytest

from cmdhelp.config import Settings
from cmdhelp.schemas import (
    CommandHelp,
    Example,
    InputOutput,
    Link,
    Parameter,
    ParameterSet,
    SyntaxItem,
    SyntaxParameter,
)


# ---------------------------------------------------------------------------
# Help Model fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def widget_help():
    """The minimal Get-Widget command used in the end-to-end scenario."""
    return CommandHelp(
        title="Get-Widget",
        module_name="Widgets",
        synopsis="Gets widgets.",
        description="Para one.\n\nPara two line1\nline2.",
        syntax=[
            SyntaxItem(
                command_name="Get-Widget",
                syntax_parameters=[SyntaxParameter(parameter_name="Id", parameter_type="String")],
            )
        ],
        examples=[
            Example(
                title="Example 1",
                remarks="Intro text.\n\n```\nGet-Widget -Id 1\n```\n\nMore remarks.",
            )
        ],
    )


@pytest.fixture
def full_help():
    """A command with two syntax variants, switch and nullable parameters."""
    return CommandHelp(
        title="Set-Widget",
        module_name="Widgets",
        locale="en-US",
        external_help_file="Widgets-help.xml",
        online_version_url="https://example.com/Set-Widget",
        synopsis="Sets widget properties.",
        description="Changes a widget.\n\n```\nSet-Widget -Name a\n```",
        notes="First note line.\n\nSecond note paragraph.",
        syntax=[
            SyntaxItem(
                command_name="Set-Widget (ByName)",
                parameter_set_name="ByName",
                is_default=True,
                syntax_parameters=[
                    SyntaxParameter(
                        parameter_name="Name",
                        parameter_type="String",
                        position="0",
                        is_mandatory=True,
                        is_positional=True,
                    ),
                    SyntaxParameter(parameter_name="Count", parameter_type="Int32"),
                    SyntaxParameter(parameter_name="Force", parameter_type="SwitchParameter"),
                ],
            ),
            SyntaxItem(
                command_name="Set-Widget (ById)",
                parameter_set_name="ById",
                syntax_parameters=[
                    SyntaxParameter(parameter_name="Id", parameter_type="Int32", is_mandatory=True),
                    SyntaxParameter(parameter_name="Name", parameter_type="Object"),
                ],
            ),
        ],
        parameters=[
            Parameter(
                name="Name",
                type="System.String",
                description="The widget name.\n\nWildcards are allowed.",
                supports_wildcards=True,
                aliases=["N"],
                parameter_sets=[
                    ParameterSet(name="ByName", position="0", is_required=True, value_from_pipeline=True),
                    ParameterSet(name="ById", position="1", is_required=False),
                ],
            ),
            Parameter(
                name="Count",
                type="System.Nullable`1[System.Int32]",
                description="How many.",
                parameter_sets=[ParameterSet(name="ByName")],
            ),
            Parameter(
                name="Force",
                type="System.Management.Automation.SwitchParameter",
                description="Skip confirmation.",
                parameter_sets=[ParameterSet(name="ByName", is_required=True)],
            ),
            Parameter(
                name="Id",
                type="System.Int32",
                parameter_sets=[
                    ParameterSet(name="ById", is_required=True, value_from_pipeline_by_property_name=True)
                ],
            ),
        ],
        examples=[
            Example(title="Example 1", remarks="```\nSet-Widget -Name a\n```"),
            Example(title="Example 2", remarks="Renames.\n\n```\nSet-Widget -Id 2 -Name b\n```"),
            Example(title="Example 3", remarks="No code here."),
        ],
        inputs=[InputOutput(typename="System.String", description="A widget name.")],
        outputs=[InputOutput(typename="Widgets.Widget", description="The changed widget.")],
        related_links=[Link(link_text="Online Version:", uri="https://example.com/Set-Widget")],
    )


@pytest.fixture
def help_json_file(tmp_path, widget_help, full_help):
    """A Help Model JSON file holding two commands."""
    path = tmp_path / "widgets.json"
    data = [widget_help.model_dump(), full_help.model_dump()]
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def settings(tmp_path):
    """Settings writing into a temporary output folder."""
    return Settings(output_folder=tmp_path / "out", num_workers=2)
