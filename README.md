# obfpl

`obfpl` watches a folder and groups the files that appear in it by base name.
A group is complete when it holds one file for every extension group that the
profile lists. The files of a complete group are then moved into a temporary
working folder. The commands of the profile run over them, step by step. The
results are moved to an output folder, and notification commands run after
that.

## Installation

```
pip install .
```

Add the `test` extra to get the test tools: `pip install .[test]`.

## Usage

```
obfpl --src src --dst dst --profile profile.yml
```

| Option            | Default                                      | Meaning                      |
|-------------------|----------------------------------------------|------------------------------|
| `-s`, `--src`     | `src`                                        | folder to watch              |
| `-d`, `--dst`     | `dst`                                        | where finished files are put |
| `-p`, `--profile` | `profile.yml` in the running program's folder | profile that drives the work |
| `-v`, `--version` |                                              | print the version and exit   |

Both folders are made absolute, and they are created if they do not exist.
Only new entries directly inside the watched folder are noticed. Subfolders are
not watched.

The program prints the names of the files it outputs and any errors, and keeps
running until it is interrupted. On Ctrl-C it exits with status 130. If the
profile or the folders cannot be set up, it exits with status 1.

## Profiles

Only YAML profiles are read, with the extension `.yml` or `.yaml`. The case of
the extension does not matter. Any other extension is refused with
`UnsupportedProfileError`.

```yaml
env:
  temp: ./tmp            # where working folders are created (made absolute)
  exec-rule: async       # "async" runs each group in a background thread; anything else runs groups in turn
ext:
  video: mp4 mkv         # group key -> text that the file's extension must occur in
  subtitle: srt
name: video              # group key whose file name (without extension) becomes {@name}
var:
  tool: "{@edr}/tool"    # {@edr} is replaced with the running program's folder
process:
  - ptn: "^episode"      # regular expression searched in the current name
    trg: ""              # optional: a text file to search the pattern in instead
    enc: utf-8           # encoding of that file: shift-jis, otherwise UTF-8
    wait: true           # wait for the previous group to finish first
    cmd: '{@tool} "{@src}/{@video}" "{@dst}"'
notify:
  - 'notify-send "{@video}"'
```

A file belongs to the first group key whose text contains the file's extension
(without the dot). Files whose extension matches no key count under the empty
key.

A step runs only when its `ptn` matches. Before its command runs, the current
name is set from the `name` key. After the command, files in the step's input
folder whose group has no file in its output folder are carried over. Everything
else in the input folder is deleted, and the two folders swap roles for the next
step. A step may also carry an `ext` mapping. It is read and kept on the
processing context, but it does not change how files are assigned to groups.

With `wait: true`, a step waits until the previous group has finished. It goes
on even if that group failed.

### Placeholders

- `{@src}` and `{@dst}` are the working input and output folders of the step.
- `{@out}` is the output folder.
- `{@name}` is the current name.
- `{@<group key>}` is the file name that belongs to that key in the working
  input folder. In notify commands it is that file's path in the output folder.
- `{@<var>}` is any entry of `var`.

### Commands

Commands are split on spaces, and single or double quotes keep text together
as one argument. No shell is involved. A command fails if it exits with a
non-zero status. Its standard error is then reported, and the processing of
that group stops. The working folder is always removed afterwards.

### Output

Finished files are moved to the output folder. If any of their names is taken
already, the whole group gets the same random 8-character suffix before the
extension. The access and modification times of the output files are set to
the moment the group's processing started.

## Library use

- `obfpl.pipeline.Pipeline(profile_path, out_path)` loads a profile.
  `Pipeline.create_notify(messages)` returns a callback that is given each new
  file path.
- `obfpl.observer.DirObserver(path)` watches a folder. `observe(created)`
  blocks until `destroy()` is called, and iterating the observer yields its
  messages.
- `obfpl.app.App(Args(src, dst, profile))` puts the two together, the same way
  the `obfpl` command does.
- `obfpl.profile.load_profile(path)` reads and checks a YAML profile.

## What it does not do

Profiles can only be declarative YAML. There is no scripted profile format.