import io
import contextlib
import unittest
from polyarith import __main__ as cli


class CommandLine(unittest.TestCase):

    def run_main(self, args):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            exit_code = cli.main(args)
        return exit_code, out.getvalue().splitlines()

    def test_report(self):
        self.assertEqual(cli.report('x^3 + x + 1'),
                         'x^3 + x + 1: degree=3 irreducible=True primitive=True '
                         'setwise_coprime=True lfsr_taps=yes')
        self.assertEqual(cli.report('x^4 + x^2 + 1'),
                         'x^4 + x^2 + 1: degree=4 irreducible=False primitive=False '
                         'setwise_coprime=False lfsr_taps=no')
        self.assertIn('irreducible=True primitive=False', cli.report('x^4 + x^3 + x^2 + x + 1'))

    def test_main(self):
        exit_code, lines = self.run_main(['x^16 + x^15 + x^13 + x^4 + 1', 'x^6+x^3+1'])
        self.assertEqual(exit_code, 0)
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].endswith('lfsr_taps=yes'))
        self.assertTrue(lines[1].startswith('x^6 + x^3 + 1: degree=6 irreducible=True'))
        self.assertTrue(lines[1].endswith('lfsr_taps=no'))

        exit_code, lines = self.run_main(['--log-level', 'warning', 'x + 1'])
        self.assertEqual(exit_code, 0)
        self.assertEqual(len(lines), 1)

    def test_errors(self):
        with self.assertLogs(level='ERROR'):
            exit_code, lines = self.run_main(['x^3 + x + 1', 'x^^2'])
        self.assertEqual(exit_code, 1)
        self.assertEqual(len(lines), 1)

        with self.assertRaises(SystemExit):
            self.run_main(['--version'])
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                self.run_main([])


if __name__ == "__main__":
    unittest.main()
