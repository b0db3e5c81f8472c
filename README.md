# qhash

qhash computes checksums of files and reads and writes `md5sum`-style
checksum lists. From the command line it supports MD4, MD5, SHA-1, SHA-256
and SHA-512. MD4 is implemented in the package, so it works even when the
local OpenSSL build does not provide it.

## Installation

```
pip install .
```

## Command line

Hash one or more files:

```
qhash file1.iso file2.iso
```

Each result is printed as `checksum  name`. A file that cannot be opened or
read is reported on standard error, and the exit status is then 1.

If you pass a single argument ending in `.md5`, it is read as a checksum
list. Each file it names is added and hashed again, and the newly computed
checksum is printed:

```
qhash SHA.md5
```

Lines in a checksum list have a checksum and a file name separated by two
spaces (text mode) or by `*` (binary mode). Lines in any other shape are
skipped.

Options:

- `-a`, `--algorithm {md4,md5,sha1,sha256,sha512}`: the hash algorithm.
- `-u`, `--uppercase`: print checksums in upper case.
- `-o`, `--output FILE`: save the checksums as an md5 list. A name without a
  `.md5` or `.sha1` extension gets `.md5` appended; only `.md5` lists can be
  written.
- `--config FILE`: read options from this file instead of the default.

## Configuration

Options are read from `~/.local/qhash/qhash.conf` (INI format), from the
`[hash]` section:

- `hashAlg`: the algorithm number (0 MD4, 1 MD5, 2 SHA-1, 3 SHA-224,
  4 SHA-256, 5 SHA-384, 6 SHA-512, 7–10 SHA3-224 to SHA3-512). The default
  is MD5; an invalid value falls back to it.
- `hashUppercase`: `1` shows checksums in upper case. The default is `0`.

Command-line options override these values. `qhash.settings.save_options`
writes them, keeping any other settings in the file.

## Library use

```python
from qhash.algorithms import HashAlgorithm, hash_text
from qhash.settings import Options
from qhash.session import HashSession

print(hash_text("abc", HashAlgorithm.MD5))

session = HashSession(Options())
session.add_file("data.bin")
session.start()
session.wait(None)
session.save("data.md5")
```

- `qhash.algorithms`: the `HashAlgorithm` enumeration, name lookups,
  `new_hash`, `hash_text` and `md4_digest`.
- `qhash.hasher.FileHasher` hashes a single file, in the calling thread with
  `run()` or on a background thread with `start()`. It reports progress,
  messages, errors and the finished checksum through `HashCallbacks`, and can
  be stopped with `stop()`.
- `qhash.checksums` parses and writes checksum lists (`ChecksumEntry`,
  `parse_md5_lines`, `parse_md5_file`, `format_md5_line`, `write_md5_file`).
- `qhash.session.HashSession` keeps a list of `FileEntry` items, runs one
  worker per file, and loads and saves checksum lists.

## What it does not do

- There is no graphical interface: no file window, progress bars, clipboard
  copying or string-hashing dialog. Progress is available only through
  `HashCallbacks` and `FileEntry.progress`.
- Checksums loaded from a list are not compared with the newly computed
  ones; the new value replaces the recorded one and nothing reports a
  mismatch.
- Only `.md5` lists are read and written; other checksum list formats are
  not supported.