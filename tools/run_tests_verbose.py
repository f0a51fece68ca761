"""Run the twinpane unittest suite and write verbose output to a file."""
import argparse
import sys
import unittest
from pathlib import Path


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--output', default='tests_output.txt', help='Report file to write.')
    parser.add_argument('--pattern', default='test_*.py', help='Test module glob.')
    args = parser.parse_args(argv)

    out = Path(args.output)
    suite = unittest.TestLoader().discover('tests', pattern=args.pattern)
    with out.open('w', encoding='utf-8') as fh:
        result = unittest.TextTestRunner(stream=fh, verbosity=2).run(suite)
        exit_code = 0 if result.wasSuccessful() else 1
        fh.write('\nEXIT_CODE:%s\n' % exit_code)
    print('Wrote', out)
    return exit_code


if __name__ == '__main__':
    sys.exit(main())
