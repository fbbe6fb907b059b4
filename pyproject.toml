[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shtools"
version = "0.1.0"
description = "Small command-line helpers for shell scripts: aligned fixed-string search, tilde expansion, file tests, number crunching and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "shell",
    "scripting",
    "cli",
    "grep",
    "stest",
    "tilde",
    "factorise",
    "utilities",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
afgrep = "shtools.afgrep:main"
fmaps = "shtools.fmaps:main"
expandpath = "shtools.tilde:expandpath_main"
unexpandpath = "shtools.tilde:unexpandpath_main"
slash = "shtools.slash:main"
stest = "shtools.filetest:main"
shufr = "shtools.shuffle:main"
rand = "shtools.randnum:main"
getsep = "shtools.getsep:main"
numsh = "shtools.numsh:main"
factorise = "shtools.factorise:main"
gcd = "shtools.gcd:main"
sumbase = "shtools.sumbase:main"
fizzbuzz = "shtools.fizzbuzz:main"
getpath = "shtools.getpath:main"
scrolls = "shtools.scrolls:main"
color = "shtools.color:main"
fillline = "shtools.term:fillline_main"
fillterm = "shtools.term:fillterm_main"
flushterm = "shtools.term:flushterm_main"
fionread = "shtools.term:fionread_main"
argn = "shtools.sh:argn_main"
assertroot = "shtools.sh:assertroot_main"
assertnonroot = "shtools.sh:assertnonroot_main"
contains = "shtools.sh:contains_main"
containsall = "shtools.sh:containsall_main"
equals = "shtools.sh:equals_main"
evalverbose = "shtools.sh:evalverbose_main"
prefixes = "shtools.sh:prefixes_main"
suffixes = "shtools.sh:suffixes_main"
rawname = "shtools.sh:rawname_main"
rawextension = "shtools.sh:rawextension_main"
argc = "shtools.sh:argc_main"
puts = "shtools.echo:puts_main"
putsn = "shtools.echo:putsn_main"
fputs = "shtools.echo:fputs_main"
fputsn = "shtools.echo:fputsn_main"
repeatline = "shtools.echo:repeatline_main"
repeatnull = "shtools.echo:repeatnull_main"
repeatstr = "shtools.echo:repeatstr_main"
one = "shtools.echo:one_main"
flushline = "shtools.echo:flushline_main"
flushstdin = "shtools.echo:flushstdin_main"
char2dec = "shtools.charcodes:char2dec_main"
char2hex = "shtools.charcodes:char2hex_main"
char2oct = "shtools.charcodes:char2oct_main"
int2char = "shtools.charcodes:int2char_main"
mkfile = "shtools.mkpath:mkfile_main"
mkparent = "shtools.mkpath:mkparent_main"

[tool.hatch.build.targets.wheel]
packages = ["shtools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
