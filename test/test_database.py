import unittest

from quiz_core import NotFound, Quiz, ValidationError

from .helpers import make_database


class TestQuizDatabase(unittest.TestCase):

    def setUp(self):
        self._db = make_database(('2+2', '4'), ('capital of France', 'Paris'))

    def test_list_all(self):
        quizzes = self._db.list_all()
        self.assertEqual(quizzes, [
            Quiz(1, '2+2', '4'),
            Quiz(2, 'capital of France', 'Paris'),
        ])

    def test_get_by_id(self):
        self.assertEqual(self._db.get_by_id(2), Quiz(2, 'capital of France', 'Paris'))
        self.assertIsNone(self._db.get_by_id(99))

    def test_create(self):
        quiz = self._db.create('  Capital of Spain ', 'Madrid ')
        self.assertEqual(quiz, Quiz(3, 'Capital of Spain', 'Madrid'))
        self.assertEqual(self._db.get_by_id(3), quiz)

    def test_create_invalid(self):
        """
        Every empty field should be reported
        """
        with self.assertRaises(ValidationError) as ctx:
            self._db.create('', '   ')

        self.assertEqual(len(ctx.exception.violations), 2)
        self.assertIn('question', ctx.exception.violations[0])
        self.assertIn('answer', ctx.exception.violations[1])
        self.assertEqual(self._db.count(), 2)

        with self.assertRaises(ValidationError) as ctx:
            self._db.create('question', '')

        self.assertEqual(len(ctx.exception.violations), 1)
        self.assertIn('answer', ctx.exception.violations[0])

    def test_update(self):
        quiz = self._db.get_by_id(1)
        quiz.question = '3+3'
        quiz.answer = '6'
        updated = self._db.update(quiz)
        self.assertEqual(updated, Quiz(1, '3+3', '6'))
        self.assertEqual(self._db.get_by_id(1), Quiz(1, '3+3', '6'))

    def test_update_invalid(self):
        with self.assertRaises(ValidationError):
            self._db.update(Quiz(1, '', '4'))

        self.assertEqual(self._db.get_by_id(1), Quiz(1, '2+2', '4'))

    def test_update_missing(self):
        with self.assertRaises(NotFound):
            self._db.update(Quiz(99, 'q', 'a'))

    def test_delete(self):
        self._db.delete_by_id(1)
        self.assertIsNone(self._db.get_by_id(1))
        self.assertEqual(self._db.count(), 1)

    def test_delete_missing_is_noop(self):
        self._db.delete_by_id(99)
        self.assertEqual(self._db.count(), 2)

    def test_ids_not_reused(self):
        self._db.delete_by_id(2)
        quiz = self._db.create('q', 'a')
        self.assertEqual(quiz.id, 3)

    def test_seed(self):
        self._db.seed([['x', 'y']])
        self.assertEqual(self._db.count(), 2)

        empty = make_database()
        empty.seed([['x', 'y'], ['z', 'w']])
        self.assertEqual([q.question for q in empty.list_all()], ['x', 'z'])

    def test_ids_outside_integer_range(self):
        """
        SQLite can't hold these ids, so there is nothing stored under them
        """
        for quiz_id in (2**63, -2**63 - 1, 99999999999999999999):
            with self.subTest(quiz_id=quiz_id):
                self.assertIsNone(self._db.get_by_id(quiz_id))
                self._db.delete_by_id(quiz_id)

                with self.assertRaises(NotFound):
                    self._db.update(Quiz(quiz_id, 'q', 'a'))

        self.assertEqual(self._db.count(), 2)
        self.assertIsNone(self._db.get_by_id(2**63 - 1))
        self.assertIsNone(self._db.get_by_id(-2**63))


if __name__ == '__main__':
    unittest.main()
