"""Tests for cmdhelp.markdown writers."""

import yaml

from cmdhelp.maml.converter import convert_command_help
from cmdhelp.markdown import CommandHelpMarkdownWriter, CommandHelpWriterSettings, ModulePageWriter
from cmdhelp.markdown.writer import COMMON_PARAMETERS_TEXT, display_type_name
from cmdhelp.schemas import CommandHelp, Parameter, SyntaxItem, SyntaxParameter


def _writer(tmp_path, name="page.md", encoding="utf-8"):
    return CommandHelpMarkdownWriter(CommandHelpWriterSettings(encoding, tmp_path / name))


def _front_matter(text):
    _, header, _ = text.split("---\n", 2)
    return yaml.safe_load(header)


def test_section_order(tmp_path, full_help):
    text = _writer(tmp_path).render(full_help)
    headings = [line for line in text.splitlines() if line.startswith("## ")]

    assert headings == [
        "## SYNOPSIS",
        "## SYNTAX",
        "## ALIASES",
        "## DESCRIPTION",
        "## EXAMPLES",
        "## PARAMETERS",
        "## INPUTS",
        "## OUTPUTS",
        "## NOTES",
        "## RELATED LINKS",
    ]
    assert text.startswith("# Set-Widget\n")


def test_syntax_lines(tmp_path, full_help):
    text = _writer(tmp_path).render(full_help)

    assert "### ByName (Default)" in text
    assert "Set-Widget [-Name] <String> [-Count <Int32>] [-Force] [<CommonParameters>]" in text
    assert "### ById\n" in text
    assert "Set-Widget -Id <Int32> [-Name <String>] [<CommonParameters>]" in text


def test_parameter_yaml_block(tmp_path, full_help):
    text = _writer(tmp_path).render(full_help)
    section = text.split("### -Name\n", 1)[1]
    block = section.split("```yaml\n", 1)[1].split("```", 1)[0]
    data = yaml.safe_load(block)

    assert data["Type"] == "System.String"
    assert data["SupportsWildcards"] is True
    assert data["Aliases"] == ["N"]
    assert data["ParameterSets"][0]["Name"] == "ByName"
    assert data["ParameterSets"][0]["IsRequired"] is True
    assert data["ParameterSets"][0]["ValueFromPipeline"] is True


def test_common_parameters_only_with_cmdlet_binding(tmp_path, full_help):
    assert COMMON_PARAMETERS_TEXT in _writer(tmp_path).render(full_help)

    plain = full_help.model_copy(update={"has_cmdlet_binding": False})
    text = _writer(tmp_path).render(plain)
    assert "### CommonParameters" not in text
    assert "[<CommonParameters>]" not in text


def test_front_matter_and_write(tmp_path, widget_help):
    metadata = {"title": "Get-Widget", "Module Name": "Widgets", "ms.date": "10/17/2026"}
    path = _writer(tmp_path, "Get-Widget.md").write(widget_help, metadata)

    text = path.read_text(encoding="utf-8")
    assert text.startswith("---\n")
    assert _front_matter(text)["Module Name"] == "Widgets"
    assert "### Example 1\n\nIntro text." in text
    assert text.endswith("\n")


def test_no_metadata_no_front_matter(tmp_path, widget_help):
    assert _writer(tmp_path).render(widget_help).startswith("# Get-Widget")


def test_links_and_notes(tmp_path, full_help):
    text = _writer(tmp_path).render(full_help)

    assert "- [Online Version:](https://example.com/Set-Widget)" in text
    assert "First note line.\n\nSecond note paragraph." in text
    assert "This cmdlet has no aliases." in text


def test_display_type_name():
    assert display_type_name("System.String") == "String"
    assert display_type_name("System.Nullable`1[System.Int32]") == "Int32"
    assert display_type_name("String[]") == "String[]"


def test_module_page(tmp_path, widget_help, full_help):
    writer = ModulePageWriter(CommandHelpWriterSettings("utf-8", tmp_path))
    path = writer.write([widget_help, full_help], {"Module Name": "Widgets"})

    assert path == tmp_path / "Widgets.md"
    text = path.read_text(encoding="utf-8")
    assert "# Widgets Module" in text
    assert "### [Get-Widget](Get-Widget.md)\n\nGets widgets." in text
    assert "### [Set-Widget](Set-Widget.md)" in text


def test_syntax_types_match_maml(tmp_path, full_help):
    text = _writer(tmp_path).render(full_help)
    by_id = convert_command_help(full_help).syntax[1]

    assert by_id.parameters[1].value.data_type == "String"
    assert "[-Name <Object>]" not in text


def test_untyped_syntax_parameter_falls_back_to_parameter_type(tmp_path):
    command_help = CommandHelp(
        title="Get-Widget",
        syntax=[SyntaxItem(command_name="Get-Widget", syntax_parameters=[SyntaxParameter(parameter_name="Id")])],
        parameters=[Parameter(name="Id", type="System.Int32")],
    )

    line = _writer(tmp_path).format_syntax_line(command_help.syntax[0], command_help)
    assert line == "Get-Widget [-Id <Int32>] [<CommonParameters>]"
