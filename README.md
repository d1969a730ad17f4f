# persistguard

A small toolkit for keeping track of and protecting files:

- **Sequential file identifiers** (`persistguard.fileid`) that persist
  between runs, in the form `a-000-000-000-000-000-000-000`. A history file
  records which paths have already been given one.
- **Backups** (`persistguard.backup`): SHA-256 hashing and copying of single
  files.
- **Quarantine** (`persistguard.isolate`): moving a file into an isolation
  directory.
- **Chunk sampling** (`persistguard.chunkscan`): planning and reading a sample
  of chunks from a file (start, middle, end, then random positions) instead of
  reading all of it.

It uses only the Python standard library and supports Python 3.10 and later.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

### `persistguard-ids`

```
persistguard-ids [directory] [--state FILE] [--interactive] [--history FILE]
```

Without `--interactive`, walks `directory` (default: your home directory)
depth first, in sorted order, and prints `Pasta: <path> | ID: <id>` for every
folder found. Folders whose path contains `Windows` or `Program Files` are
skipped together with everything below them; unreadable folders are passed
over, and a folder reached twice (for example through a symbolic link) is
numbered only once.

With `--interactive`, it prompts for paths one at a time until you type
`sair` or input ends. Paths that do not exist, or that are already in the
history file (`--history`, default `historico_ids.txt`), are reported and
skipped; every other path gets a new identifier, is added to the history, and
the state is saved.

In both modes the generator state is read from `--state` (default
`estado.bin`) before starting and written back at the end, so numbering
carries on where the last run stopped. A missing state file starts at `a` / 0.

### `persistguard-chunkscan`

```
persistguard-chunkscan path/to/file
```

Builds an analysis plan for the file, prints it, then reads the planned chunks
and prints the index, offset and size of each. It exits with status 1 when no
file is given or the file cannot be stat'ed or opened.

Planning works from the file size:

- up to 50 MB: 3 chunks covering 10% of the file;
- over 50 MB: 15 chunks covering 10%;
- over 100 MB: 30 chunks covering 5%.

The chunk size is then clamped to between 128 KB and 5 MB, and when it is
clamped the chunk count is recomputed from the covered size. For files below
about 1.25 MB this leaves zero chunks, so nothing is read.

## Library use

### File identifiers

```python
from persistguard.fileid import FileIDGenerator, History, format_file_id, scan_and_generate

print(format_file_id("a", 0))      # a-000-000-000-000-000-000-000

gen = FileIDGenerator.load("generator_state.bin")   # 'a' / 0 if the file is missing
print(gen.peek_id())               # the identifier next_id() will return
new_id = gen.next_id()             # returns it and advances the counter
gen.save("generator_state.bin")

for path, file_id in scan_and_generate("some/dir", gen):
    print(path, file_id)

history = History("historico_ids.txt")
if not history.contains("some/file"):
    history.record("some/file")
```

When the counter reaches 10^19 it wraps to 0 and the prefix moves on to the
next letter. `check_advance(previous_counter, previous_prefix)` returns an
`Advance` value (`COUNTER` or `PREFIX`) when the generator moved exactly one
step from that state, and raises `StateError` otherwise; `load` also raises
`StateError` for a truncated state file. `path_exists` and `is_system_folder`
are the checks used by the walk and the prompt, and `interactive_menu` runs
the prompt on any text streams and returns the `(path, id)` pairs it assigned.

### Backups

```python
from persistguard.backup import BackupError, backup_file, hash_file

digest = hash_file("report.pdf")                      # 32-byte SHA-256 digest
size = backup_file("report.pdf", "backup/report.pdf")  # bytes copied
```

Both raise `BackupError` (a subclass of `OSError`) when a file cannot be read
or written.

### Quarantine

```python
from persistguard.isolate import IsolationError, isolate_file

new_path = isolate_file("downloads/suspicious.bin", "isolados")
```

The isolation directory is created with owner-only permissions (`0700`) when
it does not exist (`ensure_directory`). The file keeps its name, the new path
is printed and returned, and a failed move raises `IsolationError`.

### Chunk sampling

```python
import random
from persistguard.chunkscan import analyze_file_chunks, chunk_offsets, get_analysis_plan

plan = get_analysis_plan("big.iso")          # an AnalysisPlan
for chunk in analyze_file_chunks(plan, random.Random(0)):
    print(chunk.index, chunk.offset, chunk.size)
```

Passing your own `random.Random` makes the random offsets repeatable;
`chunk_offsets(plan, rng)` yields just the offsets. Chunks whose read comes
back empty are left out of the result.

## What it does not do

- Chunk sampling only reads the chunks; it does not inspect their contents or
  decide whether a file is malicious.
- Backups copy and hash single files; there is no comparison of hashes, no
  directory backups and no restore.
- Quarantine only moves files in; there is no listing of or release from the
  isolation directory.
- There is no file-system monitoring; everything runs on demand.