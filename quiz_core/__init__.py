"""
Module for QuizCore class
"""

import asyncio
import logging

from tabulate import tabulate

from .answers import check_answer
from .dialogue import Dialogue
from .errors import (
    DialogueAborted,
    MissingArgument,
    NotANumber,
    NotFound,
    QuizError,
    ValidationError,
    report_error,
    validate_id,
)
from .play import PlaySession, PlayState
from .quiz_database import Quiz, QuizDatabase

__all__ = [
        'QuizCore', 'Dialogue', 'PlaySession', 'PlayState', 'Quiz', 'QuizDatabase',
        'QuizError', 'MissingArgument', 'NotANumber', 'NotFound', 'ValidationError',
        'DialogueAborted', 'check_answer', 'validate_id',
        ]

SUGGESTED_CONFIGS = [
        ('prompt', 'quiz > '),
        ('edit_prefill', False),
        ('authors', ['Eduardo', 'Irene']),
        ]


class QuizCore:
    """
    Quiz commands for connected clients
    """

    def __init__(self, database, **kwargs):
        logging.info('Starting Quiz Core')
        self._config = kwargs
        self._check_config()
        self._db = database

    @property
    def prompt(self):
        return self._config['prompt']

    @property
    def edit_prefill(self):
        return self._config['edit_prefill']

    async def handle_command(self, dialogue, text:str):
        """
        Run one command line for a client

        Never raises. The client is told about any failure and gets exactly
        one ready prompt afterwards.

        Arguments:
            dialogue (Dialogue): The client's dialogue
            text (str): The raw command line
        """

        parts = text.split(None, 1)
        verb = parts[0].lower() if parts else ''
        argument = parts[1].strip() if len(parts) > 1 else None

        try:
            if verb == '':
                return

            command = self._find_command(verb)
            if command is None:
                dialogue.errorlog(f"Unknown command: '{verb}'. Type 'help' for the command list.")
                return

            logging.debug('Command %s %s from %s', verb, argument, dialogue.peer)
            await command[2](dialogue, argument)

        except Exception as ex:
            await report_error(dialogue, ex)

        finally:
            dialogue.ready()

    def _check_config(self):
        for suggested in SUGGESTED_CONFIGS:
            key = suggested[0]
            default = suggested[1]
            if key not in self._config:
                logging.warning(
                        '%s not supplied to QuizCore, defaulting to %s',
                        key,
                        repr(default)
                        )
                self._config[key] = default

    def _find_command(self, verb):
        for command in self._commands():
            if verb in command[0]:
                return command

        return None

    def _commands(self):
        return (
            (
                ['h', 'help'],
                'Show this help',
                self._command_help
            ),
            (
                ['list'],
                'List the existing quizzes',
                self._command_list
            ),
            (
                ['show'],
                'Show the question and answer of quiz <id>',
                self._command_show
            ),
            (
                ['add'],
                'Add a new quiz interactively',
                self._command_add
            ),
            (
                ['delete'],
                'Delete quiz <id>',
                self._command_delete
            ),
            (
                ['edit'],
                'Edit quiz <id>',
                self._command_edit
            ),
            (
                ['test'],
                'Answer quiz <id>',
                self._command_test
            ),
            (
                ['p', 'play'],
                'Answer all the quizzes in random order',
                self._command_play
            ),
            (
                ['credits'],
                'Show the authors',
                self._command_credits
            ),
            (
                ['q', 'quit', 'exit'],
                'Leave',
                self._command_quit
            ),
        )

    async def _store(self, method, *args):
        return await asyncio.to_thread(method, *args)

    async def _get_quiz(self, argument):
        quiz_id = validate_id(argument)
        quiz = await self._store(self._db.get_by_id, quiz_id)

        if quiz is None:
            raise NotFound(quiz_id)

        return quiz

    async def _command_help(self, dialogue, argument=None):
        usage = {'show', 'delete', 'edit', 'test'}
        rows = []
        for aliases, description, _ in self._commands():
            name = '|'.join(aliases)
            if aliases[0] in usage:
                name = f'{name} <id>'
            rows.append((name, description))

        dialogue.log('Commands:')
        dialogue.log(tabulate(rows, tablefmt='plain'))

    async def _command_list(self, dialogue, argument=None):
        for quiz in await self._store(self._db.list_all):
            dialogue.log(f'{quiz.id}: {quiz.question}')

    async def _command_show(self, dialogue, argument=None):
        quiz = await self._get_quiz(argument)
        dialogue.log(f'{quiz.id}: {quiz.question} => {quiz.answer}')

    async def _command_add(self, dialogue, argument=None):
        question = await dialogue.ask('Enter a question: ')
        answer = await dialogue.ask('Enter the answer: ')
        quiz = await self._store(self._db.create, question, answer)
        dialogue.log(f'Added {quiz.id}: {quiz.question} => {quiz.answer}')

    async def _command_delete(self, dialogue, argument=None):
        quiz_id = validate_id(argument)
        await self._store(self._db.delete_by_id, quiz_id)
        dialogue.log(f'Deleted quiz {quiz_id}.')

    async def _command_edit(self, dialogue, argument=None):
        quiz = await self._get_quiz(argument)
        quiz.question = await dialogue.ask('Enter the question: ', default=quiz.question)
        quiz.answer = await dialogue.ask('Enter the answer: ', default=quiz.answer)
        quiz = await self._store(self._db.update, quiz)
        dialogue.log(f'Changed quiz {quiz.id} to: {quiz.question} => {quiz.answer}')

    async def _command_test(self, dialogue, argument=None):
        quiz = await self._get_quiz(argument)
        answer = await dialogue.ask(f'{quiz.question}? ')

        if check_answer(answer, quiz.answer):
            dialogue.log('Your answer is correct.')
            dialogue.log('CORRECT')
        else:
            dialogue.log('Your answer is incorrect.')
            dialogue.log('INCORRECT')

    async def _command_play(self, dialogue, argument=None):
        await PlaySession(self._db, dialogue).run()

    async def _command_credits(self, dialogue, argument=None):
        dialogue.log('Authors:')
        for author in self._config['authors']:
            dialogue.log(f'  {author}')

    async def _command_quit(self, dialogue, argument=None):
        logging.info('Client %s quit', dialogue.peer)
        await dialogue.close()
