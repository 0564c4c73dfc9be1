import unittest
from polyarith import gmpy


class Arithmetic(unittest.TestCase):

    def test_basic(self):
        self.assertFalse(gmpy.is_prime(1))
        self.assertTrue(gmpy.is_prime(2))
        self.assertTrue(gmpy.is_prime(101))
        self.assertFalse(gmpy.is_prime(561))
        self.assertTrue(gmpy.is_prime(2**16+1))
        self.assertFalse(gmpy.is_prime(41041))

        self.assertEqual(gmpy.next_prime(1), 2)
        self.assertEqual(gmpy.next_prime(2), 3)
        self.assertEqual(gmpy.next_prime(256), 257)

        self.assertEqual(gmpy.powmod(3, 256, 257), 1)
        self.assertEqual(gmpy.powmod(2, 3, 3), 2)
        self.assertEqual(gmpy.powmod(5, 3, 1), 0)

        self.assertEqual(gmpy.gcdext(3, 257), (1, 86, -1))
        self.assertEqual(gmpy.gcdext(1234, 257), (1, -126, 605))
        self.assertEqual(gmpy.gcdext(-1234*3, -257*3), (3, 126, -605))
        g, s, t = gmpy.gcdext(240, 46)
        self.assertEqual(g, 2)
        self.assertEqual(240*s + 46*t, 2)

        self.assertEqual(gmpy.invert(3, 257), 86)
        self.assertEqual(gmpy.invert(-1, 257), 256)
        self.assertRaises(ZeroDivisionError, gmpy.invert, 2, 0)
        self.assertRaises(ZeroDivisionError, gmpy.invert, 2, 4)

    def test_gcd(self):
        self.assertEqual(gmpy.gcd(12, 18), 6)
        self.assertEqual(gmpy.gcd(-12, 18), 6)
        self.assertEqual(gmpy.gcd(0, 7), 7)
        self.assertEqual(gmpy.lcm(4, 6), 12)
        self.assertEqual(gmpy.lcm(0, 5), 0)
        self.assertEqual(gmpy.array_gcd([10, 5, 15]), 5)
        self.assertEqual(gmpy.array_gcd([4, 3, 2, 1, 0]), 1)
        self.assertEqual(gmpy.array_gcd([8, 4, 0]), 4)
        self.assertEqual(gmpy.array_gcd([7]), 7)
        self.assertEqual(gmpy.array_gcd([]), 0)
        self.assertEqual(gmpy.array_gcd(iter([6, 9])), 3)

    def test_mod(self):
        self.assertEqual(gmpy.mod(7, 3), 1)
        self.assertEqual(gmpy.mod(-7, 3), 2)
        self.assertEqual(gmpy.mod(-1, 2), 1)
        self.assertEqual(gmpy.mod(7, -3), 1)
        self.assertEqual(gmpy.mod(-7, 0), -7)

    def test_prime_factors(self):
        pf = gmpy.prime_factors
        self.assertEqual(pf(1), [])
        self.assertEqual(pf(2), [2])
        self.assertEqual(pf(12), [2, 3])
        self.assertEqual(pf(2**10), [2])
        self.assertEqual(pf(2**3 - 1), [7])
        self.assertEqual(pf(2**6 - 1), [3, 7])
        self.assertEqual(pf(2**16 - 1), [3, 5, 17, 257])
        self.assertEqual(pf(2**32 - 1), [3, 5, 17, 257, 65537])
        self.assertEqual(pf(2**61 - 1), [2**61 - 1])  # 9th Mersenne prime
        self.assertEqual(pf(2**64 - 1), [3, 5, 17, 257, 641, 65537, 6700417])
        self.assertEqual(pf((1031*1033)**2), [1031, 1033])
        self.assertRaises(ValueError, pf, 0)


if __name__ == "__main__":
    unittest.main()
