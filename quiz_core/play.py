"""
Module for PlaySession class
"""

import asyncio
import logging
import random
from enum import Enum

from .answers import check_answer
from .errors import report_error


class PlayState(Enum):
    LOADING = 'loading'
    AWAITING_ANSWER = 'awaiting_answer'
    FINISHED = 'finished'


class PlaySession:
    """
    Ask every stored quiz once, in random order, until one is answered wrong

    The pool is a private copy of the quizzes taken when the game starts.
    Quizzes are drawn from it without replacement.
    """

    def __init__(self, database, dialogue, rng=None):
        self._db = database
        self._dialogue = dialogue
        self._rng = rng or random
        self.state = PlayState.LOADING
        self.score = 0
        self.pool = []
        self.won = False

    async def run(self):
        """
        Play until a wrong answer, an empty pool, or a failure

        Returns:
            int: Number of correct answers
        """

        try:
            self.pool = list(await asyncio.to_thread(self._db.list_all))
            logging.debug('Play session for %s with %s quizzes', self._dialogue.peer, len(self.pool))
            self.state = PlayState.AWAITING_ANSWER if self.pool else PlayState.FINISHED
            self.won = not self.pool

            while self.state is PlayState.AWAITING_ANSWER:
                await self._play_one()

        except Exception as ex:
            self.state = PlayState.FINISHED
            await report_error(self._dialogue, ex)

        self._finish()

        return self.score

    async def _play_one(self):
        quiz = self.pool.pop(self._rng.randrange(len(self.pool)))
        answer = await self._dialogue.ask(f'{quiz.question}? ')

        if not check_answer(answer, quiz.answer):
            self._dialogue.log('INCORRECT.')
            self.state = PlayState.FINISHED
            return

        self.score += 1
        self._dialogue.log(f'CORRECT - {self.score} right so far.')

        if not self.pool:
            self.won = True
            self.state = PlayState.FINISHED

    def _finish(self):
        if self.won:
            self._dialogue.log('No more questions.')

        self._dialogue.log(f'Game over. Score: {self.score}')
        logging.info('Play session for %s finished with score %s', self._dialogue.peer, self.score)
