from dnpath import (
    ConversionResult,
    FormatError,
    FormatWarning,
    convert_each,
    dn_to_path_each,
    iter_values,
    path_to_dn_each,
    reverse_words_each,
)
import itertools
import unittest
import warnings


class TestConversionResult(unittest.TestCase):
    def test_ok(self):
        result = ConversionResult('a', value='b')
        self.assertTrue(result.ok)
        self.assertEqual('b', result.unwrap())

    def test_error(self):
        error = FormatError('a', 'is bad')
        result = ConversionResult('a', error=error)
        self.assertFalse(result.ok)
        self.assertIsNone(result.value)
        with self.assertRaises(FormatError):
            result.unwrap()

    def test_eq(self):
        self.assertEqual(ConversionResult('a', value='b'), ConversionResult('a', value='b'))
        self.assertNotEqual(ConversionResult('a', value='b'), ConversionResult('a', value='c'))


class TestBatch(unittest.TestCase):
    def test_independence(self):
        """Ensure one malformed input does not affect the others"""
        paths = [
            'example.com/a',
            '/leadingslash',
            'blackmesa.net/Science/Physics',
            'example.com',
        ]
        results = list(path_to_dn_each(paths))
        self.assertEqual(len(paths), len(results))
        self.assertEqual(paths, [r.input for r in results])
        self.assertEqual([True, False, True, True], [r.ok for r in results])
        self.assertEqual('OU=a,DC=example,DC=com', results[0].value)
        self.assertEqual('OU=Physics,OU=Science,DC=blackmesa,DC=net', results[2].value)
        self.assertEqual('DC=example,DC=com', results[3].value)
        self.assertIsInstance(results[1].error, FormatError)
        self.assertEqual('/leadingslash', results[1].error.value)

    def test_cn_leaf(self):
        results = list(path_to_dn_each(['a.b/c', 'a.b'], cn_leaf=True))
        self.assertEqual(['CN=c,DC=a,DC=b', 'DC=a,DC=b'], [r.value for r in results])

    def test_dn_to_path(self):
        dns = [
            'CN=Einstein Albert,OU=Physics,OU=Science,DC=blackmesa,DC=net',
            'CN=bad;char,DC=a,DC=b',
            'DC=example,DC=com',
        ]
        results = list(dn_to_path_each(dns))
        self.assertEqual('blackmesa.net/Science/Physics/Einstein Albert', results[0].unwrap())
        self.assertFalse(results[1].ok)
        self.assertEqual('example.com', results[2].unwrap())

    def test_reverse_words(self):
        results = list(reverse_words_each(['Charlie Brown', 'OnlyOneWord', 'George   McFly']))
        self.assertEqual(['Brown Charlie', None, 'McFly George'], [r.value for r in results])

    def test_empty(self):
        self.assertEqual([], list(path_to_dn_each([])))
        self.assertEqual([], list(dn_to_path_each(iter(()))))

    def test_single_string(self):
        """Ensure a lone string is taken as one input"""
        results = list(reverse_words_each('Charlie Brown'))
        self.assertEqual([ConversionResult('Charlie Brown', value='Brown Charlie', index=0)], results)

    def test_index(self):
        results = list(dn_to_path_each(['DC=a,DC=b', 'bad', 'DC=c,DC=d']))
        self.assertEqual([0, 1, 2], [r.index for r in results])

    def test_throw_not_captured(self):
        """Ensure an error thrown into the generator is not stored as a failed input"""
        results = path_to_dn_each(['a.b', 'c.d'])
        self.assertTrue(next(results).ok)
        with self.assertRaises(FormatError):
            results.throw(FormatError('c.d', 'is thrown in'))

    def test_lazy(self):
        """Ensure results are produced without consuming the whole input"""
        results = dn_to_path_each('DC=example,DC=com' for _ in itertools.count())
        for result in itertools.islice(results, 3):
            self.assertEqual('example.com', result.value)

    def test_other_errors_propagate(self):
        def broken(value):
            raise ValueError(value)

        with self.assertRaises(ValueError):
            list(convert_each(broken, ['a']))

    def test_summary_logged(self):
        with self.assertLogs('dnpath', level='INFO') as cm:
            list(path_to_dn_each(['a.b', '/bad']))
        self.assertIn('path_to_dn processed 2 inputs (1 failed)', cm.output[-1])


class TestIterValues(unittest.TestCase):
    def test_report(self):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            values = list(iter_values(reverse_words_each(['Charlie Brown', 'OnlyOneWord', 'a b'])))
        self.assertEqual(['Brown Charlie', 'b a'], values)
        self.assertEqual(1, len(w))
        self.assertTrue(issubclass(w[0].category, FormatWarning))
        self.assertIn('OnlyOneWord', str(w[0].message))

    def test_report_repeats(self):
        """Ensure every failure is reported under the default filter, repeats included"""
        inputs = ['bad', 'DC=a,DC=b', 'bad', 'bad']
        with warnings.catch_warnings(record=True) as w:
            warnings.resetwarnings()
            values = list(iter_values(dn_to_path_each(inputs)))
            values += list(iter_values(dn_to_path_each(inputs)))
        self.assertEqual(['a.b', 'a.b'], values)
        self.assertEqual(6, len(w))
        self.assertIn('input #2', str(w[1].message))
        for warning in w:
            self.assertTrue(issubclass(warning.category, FormatWarning))

    def test_no_report(self):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            values = list(iter_values(dn_to_path_each(['not a dn', 'DC=a,DC=b']), report=False))
        self.assertEqual(['a.b'], values)
        self.assertEqual(0, len(w))


if __name__ == '__main__':
    unittest.main()
