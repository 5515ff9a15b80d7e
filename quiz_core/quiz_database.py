"""
Module for QuizDatabase class
"""

import re
import sqlite3
import logging
from time import time
from pathlib import Path
from threading import Lock
from dataclasses import dataclass

from .errors import NotFound, ValidationError

REG_QUERIES = r'(?i)^\s*--\s*name\s*:\s*(\S+)\s*\n([\S\s]+?)(?=--name|\Z)'
QUERIES_FILE = (Path(__file__).parent / 'queries.sql').resolve()

# SQLite INTEGER is a signed 64 bit value
MIN_ID = -2**63
MAX_ID = 2**63 - 1


@dataclass
class Quiz:
    id: int
    question: str
    answer: str


class QuizDatabase:
    """
    Quiz storage components
    """

    def __init__(self, db_path):
        self._queries = self._load_queries(QUERIES_FILE)
        self._lock = Lock()
        self._connection = sqlite3.connect(db_path, check_same_thread=False)
        self._create_tables()

    def list_all(self):
        return [self._as_quiz(row) for row in self.select_iter('list_quizzes', as_map=True)]

    def get_by_id(self, quiz_id):
        if not self._storable_id(quiz_id):
            return None

        row = self.select_one('get_quiz', {'id': quiz_id}, as_map=True)
        return self._as_quiz(row) if row else None

    def create(self, question, answer):
        question, answer = self._validate(question, answer)
        cursor = self.execute('add_quiz', {
            'question': question,
            'answer': answer,
            'now': int(time()),
        }, auto_commit=True)
        logging.info('New quiz id: %s', cursor.lastrowid)

        return Quiz(cursor.lastrowid, question, answer)

    def update(self, quiz):
        if not self._storable_id(quiz.id):
            raise NotFound(quiz.id)

        question, answer = self._validate(quiz.question, quiz.answer)
        cursor = self.execute('update_quiz', {
            'id': quiz.id,
            'question': question,
            'answer': answer,
            'now': int(time()),
        }, auto_commit=True)

        if cursor.rowcount == 0:
            raise NotFound(quiz.id)

        logging.info('Updated quiz id: %s', quiz.id)
        quiz.question = question
        quiz.answer = answer

        return quiz

    def delete_by_id(self, quiz_id):
        if not self._storable_id(quiz_id):
            return

        cursor = self.execute('delete_quiz', {'id': quiz_id}, auto_commit=True)
        logging.info('Deleted quiz id: %s (%s rows)', quiz_id, cursor.rowcount)

    def count(self):
        return self.select_one('count_quizzes')[0]

    def seed(self, quizzes):
        """
        Add the given question/answer pairs if there are no quizzes yet

        Arguments:
            quizzes (list): Pairs of [question, answer]
        """

        if self.count() > 0:
            return

        for question, answer in quizzes:
            self.create(question, answer)

    def _create_tables(self):
        for query in self._queries:
            if query.startswith('create_') and query.endswith('_table'):
                self.execute(query, auto_commit = True)

    def _do_execute(self, query_name, params = None):
        if params is None:
            params = ()

        cursor = self._connection.cursor()
        query = self._queries[query_name]
        cursor.execute(query, params)

        return cursor

    def execute(self, query_name, params = None, auto_commit = False):
        with self._lock:
            cursor = self._do_execute(query_name, params)

            if auto_commit:
                self._connection.commit()

            return cursor

    def close(self):
        with self._lock:
            self._connection.close()

    def select_iter(self, query_name, params = None, as_map = False):
        with self._lock:
            cursor = self._do_execute(query_name, params)
            rows = cursor.fetchall()

        for row in rows:
            yield self._row_as_map(cursor, row) if as_map else row

    def select_one(self, query_name, params = None, as_map = False):
        with self._lock:
            cursor = self._do_execute(query_name, params)
            row = cursor.fetchone()

            if as_map:
                row = self._row_as_map(cursor, row)

            return row

    @staticmethod
    def _storable_id(quiz_id):
        return MIN_ID <= quiz_id <= MAX_ID

    @staticmethod
    def _validate(question, answer):
        question = (question or '').strip()
        answer = (answer or '').strip()
        violations = []

        if question == '':
            violations.append('The question must not be empty.')

        if answer == '':
            violations.append('The answer must not be empty.')

        if violations:
            raise ValidationError(violations)

        return question, answer

    @staticmethod
    def _as_quiz(row):
        return Quiz(row['id'], row['question'], row['answer'])

    @staticmethod
    def _row_as_map(cursor, row):
        if row is None:
            return None
        return {k[0]:row[i] for i,k in enumerate(cursor.description)}

    @staticmethod
    def _load_queries(filename):
        queries = {}

        with open(filename, 'r', encoding='utf-8') as file_pointer:
            query_text = file_pointer.read()

        matches = re.finditer(REG_QUERIES, query_text, flags = re.MULTILINE)

        for match in matches:
            name = match[1]
            query = match[2]
            queries[name] = query

        return queries
