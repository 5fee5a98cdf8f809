import io

import pytest

from kubecolor.apply import ApplyPrinter
from kubecolor.color import Color, apply
from kubecolor.describe import DescribePrinter
from kubecolor.dispatch import KubectlOutputColoredPrinter
from kubecolor.explain import ExplainPrinter
from kubecolor.json_printer import JsonPrinter
from kubecolor.kubectl import CLICommand, CLICommandInfo, FormatOption
from kubecolor.options import OptionsPrinter
from kubecolor.status import OpenShiftStatusPrinter
from kubecolor.table import TablePrinter
from kubecolor.version_printer import VersionPrinter, VersionShortPrinter
from kubecolor.yaml_printer import YamlPrinter


def render(printer, text):
    out = io.StringIO()
    printer.print(io.StringIO(text), out)
    return out.getvalue()


GET_TABLE = (
    "NAME   READY   STATUS\n"
    "foo    1/2     CrashLoopBackOff\n"
    "bar    1/1     Running\n"
)


def test_get_table_highlights_problems():
    info = CLICommandInfo(subcommand=CLICommand.GET)
    output = render(KubectlOutputColoredPrinter(info, dark_background=True), GET_TABLE)
    lines = output.splitlines()
    assert len(lines) == 3
    assert lines[0] == apply("NAME   READY   STATUS", Color.WHITE)
    assert apply("CrashLoopBackOff", Color.RED) in lines[1]
    assert apply("1/2", Color.YELLOW) in lines[1]
    assert apply("1/1", Color.YELLOW) not in lines[2]


def test_get_table_without_header():
    info = CLICommandInfo(subcommand=CLICommand.GET, no_header=True)
    output = render(KubectlOutputColoredPrinter(info), "foo   Running\n")
    assert output.startswith(apply("foo", Color.CYAN))


def test_api_versions_never_has_header():
    info = CLICommandInfo(subcommand=CLICommand.API_VERSIONS)
    output = render(KubectlOutputColoredPrinter(info), "apps/v1\nv1\n")
    assert output.splitlines() == [apply("apps/v1", Color.CYAN), apply("v1", Color.CYAN)]


def test_top_has_header():
    info = CLICommandInfo(subcommand=CLICommand.TOP)
    output = render(KubectlOutputColoredPrinter(info), "name   cpu\nfoo   1m\n")
    assert output.splitlines()[0] == apply("name   cpu", Color.WHITE)


def test_help_is_yellow():
    info = CLICommandInfo(subcommand=CLICommand.GET, help=True)
    output = render(KubectlOutputColoredPrinter(info), "Usage:\n  kubectl get\n")
    assert output == apply("Usage:", Color.YELLOW) + "\n" + apply("  kubectl get", Color.YELLOW) + "\n"


def test_unknown_subcommand_is_green():
    info = CLICommandInfo(subcommand=CLICommand.LOGS)
    output = render(KubectlOutputColoredPrinter(info), "a log line\n")
    assert output == apply("a log line", Color.GREEN) + "\n"


JSON_TEXT = '{\n    "a": 1,\n    "b": "x"\n}\n'
YAML_TEXT = "apiVersion: v1\nkind: Pod\nspec:\n  replicas: 2\n"


@pytest.mark.parametrize(
    ("info", "text", "reference"),
    [
        (CLICommandInfo(subcommand=CLICommand.GET, format_option=FormatOption.JSON), JSON_TEXT,
         JsonPrinter(dark_background=False)),
        (CLICommandInfo(subcommand=CLICommand.GET, format_option=FormatOption.YAML), YAML_TEXT,
         YamlPrinter(dark_background=False)),
        (CLICommandInfo(subcommand=CLICommand.VERSION, format_option=FormatOption.JSON), JSON_TEXT,
         JsonPrinter(dark_background=False)),
        (CLICommandInfo(subcommand=CLICommand.VERSION, format_option=FormatOption.YAML), YAML_TEXT,
         YamlPrinter(dark_background=False)),
        (CLICommandInfo(subcommand=CLICommand.VERSION, short=True), "Client Version: v1.19.3\n",
         VersionShortPrinter(dark_background=False)),
        (CLICommandInfo(subcommand=CLICommand.VERSION),
         'Client Version: version.Info{Major:"1", Minor:"19"}\n',
         VersionPrinter(dark_background=False)),
        (CLICommandInfo(subcommand=CLICommand.APPLY), "deployment.apps/foo created\n",
         ApplyPrinter(dark_background=False)),
        (CLICommandInfo(subcommand=CLICommand.APPLY, format_option=FormatOption.YAML), YAML_TEXT,
         YamlPrinter(dark_background=False)),
        (CLICommandInfo(subcommand=CLICommand.OPTIONS), "Options:\n  --v=0: level\n",
         OptionsPrinter(dark_background=False)),
        (CLICommandInfo(subcommand=CLICommand.STATUS), "svc/web - 1 pod running\n",
         OpenShiftStatusPrinter(dark_background=False)),
        (CLICommandInfo(subcommand=CLICommand.DESCRIBE), "Name:         nginx\nStatus:  Running\n",
         DescribePrinter(False, TablePrinter(False, False))),
    ],
)
def test_output_matches_dedicated_printer(info, text, reference):
    printer = KubectlOutputColoredPrinter(info, dark_background=False)
    assert render(printer, text) == render(reference, text)


def test_explain_passes_recursive():
    text = "KIND:     Pod\n\nFIELDS:\n   spec\t<Object>\n      containers\t<[]Object>\n"
    info = CLICommandInfo(subcommand=CLICommand.EXPLAIN)
    printer = KubectlOutputColoredPrinter(info, dark_background=True, recursive=True)
    assert render(printer, text) == render(ExplainPrinter(recursive=True), text)
    assert render(printer, text) != render(ExplainPrinter(recursive=False), text)


def test_select_printer_for_status():
    info = CLICommandInfo(subcommand=CLICommand.STATUS)
    selected = KubectlOutputColoredPrinter(info, dark_background=False).select_printer()
    assert isinstance(selected, OpenShiftStatusPrinter)
    assert selected.dark_background is False