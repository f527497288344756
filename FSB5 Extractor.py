''' A script for extracting the samples of FSB5 sample banks as standalone WAV and MP3 files '''

# Define current version
CURRENT_VERSION = '2026.10.18'

# Imports
import os
import sys
import argparse
import logging
from typing import Final

# Ensure /fsb5 is present and can be imported
try:
  import fsb5

  # Import the error families
  from fsb5.Errors import FSB5Error, CodecError

  from fsb5.YAMLSerializer import dump_manifest

except ImportError as e:
  print("Error: One or more required utilities are missing.")
  print(f"Details: {e}")
  print("\nPlease ensure the 'fsb5' package is correctly installed and all its dependencies are available.")
  sys.exit(1)

# Create ANSI formatting for terminal messages
# TERMINAL TEXT COLORS
RED        : Final = '\x1b[31m'
YELLOW     : Final = '\x1b[33m'
BLUE_39    : Final = '\x1b[38;5;39m'
GRAY_245   : Final = '\x1b[38;5;245m'
GREEN_79   : Final = '\x1b[38;5;79m'

# TERMINAL TEXT STYLES
BOLD      : Final = '\x1b[1m'
RESET     : Final = '\x1b[0m' # Resets all text styles and colors

logger = logging.getLogger('fsb5_extractor')

# Argument Parser
def parse_args(argv=None):
  parser = argparse.ArgumentParser(
    formatter_class=argparse.RawDescriptionHelpFormatter,
    description='''This script extracts every sample of one or more FSB5 banks as standalone files.'''
  )

  parser.add_argument(
    'files',
    nargs='+',
    help="one or more FSB5 sample banks (.fsb)"
  )
  parser.add_argument(
    '-d',
    '--outdir',
    default='.',
    help="directory the samples are written to, one sub-directory per bank (defaults to the current directory)"
  )
  parser.add_argument(
    '-l',
    '--list',
    action='store_true',
    help="list the samples without extracting them"
  )
  parser.add_argument(
    '-m',
    '--manifest',
    action='store_true',
    help="also write a YAML manifest describing each bank's header and sample headers"
  )
  parser.add_argument(
    '-v',
    '--verbose',
    action='store_true',
    help="show debug messages from the parser"
  )
  parser.add_argument(
    '--log-file',
    help="append errors, with tracebacks, to this file"
  )
  parser.add_argument(
    '--version',
    action='version',
    version=f'%(prog)s {CURRENT_VERSION}'
  )

  return parser.parse_args(argv)

''' Logging '''
def setup_logging(verbose: bool, log_file: str = None) -> None:
  root = logging.getLogger()
  root.setLevel(logging.DEBUG if verbose else logging.INFO)

  console = logging.StreamHandler()
  console.setFormatter(logging.Formatter('%(message)s'))
  root.addHandler(console)

  if log_file:
    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    file_handler.setLevel(logging.ERROR)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
    root.addHandler(file_handler)

''' Helper Functions '''
def read_binary(filename: str) -> bytes:
  with open(filename, 'rb') as file:
    binary = file.read()
  return binary

def sample_filename(sample: fsb5.Sample) -> str:
  name = sample.name() or f"{sample.index:04d}"
  name = name.replace('/', '_').replace('\\', '_')
  return f"{name}.{sample.file_extension}"

''' Extraction '''
def list_bank(filename: str, bank: fsb5.Bank) -> None:
  print(f"\n{BOLD}{filename}{RESET} {GRAY_245}({bank.header.mode.name}, {len(bank)} samples){RESET}")
  print("  length      freq.  ch.  name")
  print("=====================================================================")
  for sample in bank.samples():
    print(f"  {len(sample.data):<10}  {sample.frequency:6} {sample.channels:>3}  {sample_filename(sample)}")

def extract_bank(bank: fsb5.Bank, out_dir: str) -> int:
  os.makedirs(out_dir, exist_ok=True)

  written = 0
  for sample in bank.samples():
    try:
      container = sample.to_container_bytes()
    except CodecError as e:
      logger.warning(f"{YELLOW}Skipping sample {sample.index}: {e}{RESET}")
      continue

    path = os.path.join(out_dir, sample_filename(sample))
    with open(path, 'wb') as f:
      f.write(container)

    logger.debug("Wrote %s (%d bytes)", path, len(container))
    written += 1

  return written

def write_manifest(bank: fsb5.Bank, path: str) -> None:
  with open(path, 'w', encoding='utf-8') as f:
    dump_manifest(bank.to_yaml(), f)

''' Main Function '''
def main(argv=None) -> int:
  args = parse_args(argv)
  setup_logging(args.verbose, args.log_file)

  failures = 0
  for file in args.files:
    filename = os.path.basename(os.path.splitext(file)[0])

    try:
      bank = fsb5.open(read_binary(file))
    except (OSError, FSB5Error) as e:
      logger.error(f"{RED}Error: {file}: {e}{RESET}", exc_info=args.verbose)
      failures += 1
      continue

    if args.list:
      list_bank(file, bank)
      continue

    out_dir = os.path.join(args.outdir, filename)
    written = extract_bank(bank, out_dir)
    logger.info(f"{GREEN_79}{file}{RESET}: extracted {written} of {len(bank)} sample(s) to {BLUE_39}{out_dir}{RESET}")

    if args.manifest:
      manifest_path = os.path.join(out_dir, f"{filename}.yaml")
      write_manifest(bank, manifest_path)
      logger.info(f"Wrote manifest {manifest_path}")

  return 1 if failures else 0

if __name__ == '__main__':
  sys.exit(main())
