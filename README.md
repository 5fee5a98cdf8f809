# kubecolor

`kubecolor` wraps `kubectl` (or `oc`) and colorizes what it prints. Every
argument other than kubecolor's own flags is passed on to `kubectl`
unchanged, so it can be used as a drop-in replacement:

```sh
kubecolor get pods
kubecolor describe pod my-pod
kubecolor get deployment my-app -o yaml
kubecolor explain pod --recursive
```

Many people add an alias such as `alias kubectl=kubecolor` to their shell.
The same command is available as `python -m kubecolor.runner`.

## What gets colored

- `get`, `top`, `api-resources`, `api-versions`: tables, one color per
  column; in `get`, `CrashLoopBackOff` is red and incomplete readiness such
  as `1/2` is yellow. A line written entirely in upper case is shown as a
  header.
- `-o json` / `-o yaml` (also `-ojson`, `-o=json`, `--output json`, ...) for
  `get`, `version` and `apply`: keys colored by nesting depth; strings,
  numbers, booleans and nulls each in their own color.
- `describe`, `explain`, `version` (including `--short`), `options`, `apply`
  (`created`, `configured`, `unchanged`, and `(dry run)`).
- `oc status`, and route details in `oc describe route`.
- Help output (`-h`, `--help`, or no subcommand at all) is shown in yellow.
- Other supported subcommands are shown in green.
- Lines on standard error starting with `error` (any case) are red, the rest
  yellow.

These commands run without colorizing: `create`, `debug`, `delete`, `edit`,
`attach`, `replace`, `completion`, `exec`, `proxy`, `plugin`, `wait`, `run`,
`ctx`, `ns`, and for `oc`, `new-project`, `new-app` and `policy`. Nor is
anything colorized when an argument starts with `__` (shell completion
requests).

If a printer cannot make sense of the output, what `kubectl` printed is
written out as it came.

## Options

These flags are consumed by `kubecolor` and not passed on to `kubectl`:

| Flag                  | Effect                                                |
|-----------------------|-------------------------------------------------------|
| `--plain`             | Do not colorize anything.                             |
| `--light-background`  | Use colors that read well on a light terminal.        |
| `--force-colors`      | Colorize even when standard output is not a terminal. |
| `--kubecolor-version` | Print kubecolor's version string and exit.            |
| `--use-oc-cli`        | Run `oc` instead of `kubectl`.                        |

The environment variable `KUBECTL_COMMAND` names the command to run instead
of `kubectl`; it is ignored when `--use-oc-cli` is given.

When output is piped (for example `kubecolor get pods | grep nginx`), colors
are off unless `--force-colors` is given. `--plain` wins over
`--force-colors`.

## Exit status

`kubecolor` exits with the status of the `kubectl` command it ran, and with
1 when that command cannot be started.

## Using the printers from Python

Each printer has a `print(stream, out)` method that reads lines from any
iterable of strings (such as an open text file) and writes colored text to
`out`:

```python
import io
import sys

from kubecolor.json_printer import JsonPrinter

JsonPrinter(dark_background=True).print(io.StringIO('{\n    "a": 1\n}\n'), sys.stdout)
```

The printers are `TablePrinter` (`kubecolor.table`), `JsonPrinter`,
`YamlPrinter` (`kubecolor.yaml_printer`), `DescribePrinter`
(`kubecolor.describe`), `ExplainPrinter` (`kubecolor.explain`),
`ApplyPrinter` (`kubecolor.apply`), `OptionsPrinter` (`kubecolor.options`),
`VersionPrinter` and `VersionShortPrinter` (`kubecolor.version_printer`),
`OpenShiftStatusPrinter` (`kubecolor.status`), and `SingleColoredPrinter`
and `WithFuncPrinter` (`kubecolor.single`). `KubectlOutputColoredPrinter`
in `kubecolor.dispatch` picks the right one for a command line inspected
with `kubecolor.kubectl.inspect_cli_command_info`.

## Limits

Colors are fixed: there is no configuration file or theme setting beyond
`--light-background`. Output formats other than JSON, YAML and wide (such as
`custom-columns` or `go-template`) get no special treatment.