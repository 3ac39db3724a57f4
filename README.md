# oxide-wdns

Command-line handling for a DNS-over-HTTPS (DoH) gateway server: the
options the server accepts, their defaults, and the check applied to
them before the server starts. Everything lives in the module
`oxide_wdns.args`, which uses only the standard library.

## Options

| Short | Long        | Meaning                                            | Default       |
|-------|-------------|----------------------------------------------------|---------------|
| `-c`  | `--config`  | Server configuration file path (YAML format)       | `config.yaml` |
| `-t`  | `--test`    | Test the configuration file for validity and exit  | off           |
| `-d`  | `--debug`   | Enable debug-level logging for detailed output     | off           |
| `-V`  | `--version` | Print `oxide-wdns 0.1.6` and exit                   |               |
| `-h`  | `--help`    | Print the description and the options, then exit   |               |

## Usage

```python
from oxide_wdns.args import parse_args

args = parse_args(["-c", "config.yaml", "--debug"])

print(args.config)       # PosixPath('config.yaml') on POSIX systems
print(args.test_config)  # False
print(args.debug)        # True

args.validate()          # raises FileNotFoundError if config.yaml is missing
```

- `parse_args(argv)` parses a list of argument strings, or the process's
  own command line when `argv` is `None`, and returns a `CliArgs`.
  Unknown options make it exit with a usage message, as `argparse` does.
- `build_parser()` returns the underlying `argparse.ArgumentParser`, for
  printing help or reusing the options elsewhere.
- `CliArgs` is a dataclass with the fields `config` (a `pathlib.Path`;
  a string given here is turned into one), `test_config` and `debug`.
  It can be built directly as well as through `parse_args`.
- `CliArgs.validate()` raises `FileNotFoundError` with the message
  `Configuration file does not exist: <path>` when the file named by
  `config` does not exist, and returns `None` otherwise.

## What this package does not do

It only parses and checks the server's options. It does not read or
interpret the configuration file, install a command, or run a DoH
server; a program that does those things can use `parse_args` and
`CliArgs.validate` as its first step.

## Running the tests

Install the package with its `test` extra and run `pytest` from the
project directory.