"""
Errors reported back to quiz clients, and argument validation
"""

import re
import logging

REG_LEADING_INT = r'^\s*([+-]?[0-9]+)'


class QuizError(Exception):
    """
    Base for failures that are reported to the client as a single line
    """


class MissingArgument(QuizError):
    def __init__(self):
        super().__init__('Missing <id> argument.')


class NotANumber(QuizError):
    def __init__(self):
        super().__init__('The <id> argument is not a number.')


class NotFound(QuizError):
    def __init__(self, quiz_id):
        super().__init__(f'There is no quiz with id={quiz_id}.')
        self.quiz_id = quiz_id


class ValidationError(QuizError):
    """
    The store rejected a quiz. Every violated field has its own entry in
    violations.
    """

    def __init__(self, violations):
        super().__init__('The quiz is invalid')
        self.violations = list(violations)


class DialogueAborted(QuizError):
    def __init__(self, reason='Connection closed'):
        super().__init__(reason)


def validate_id(value):
    """
    Parse the leading integer of an <id> argument and discard the rest

    Arguments:
        value (str or None): Raw argument text

    Returns:
        int: The parsed id
    """

    if value is None:
        raise MissingArgument()

    match = re.match(REG_LEADING_INT, str(value))
    if match is None:
        raise NotANumber()

    return int(match[1])


async def report_error(dialogue, error):
    """
    Tell the client what went wrong with its last command
    """

    if isinstance(error, DialogueAborted):
        logging.info('Dialogue aborted for %s: %s', dialogue.peer, error)
        await dialogue.close()

    elif isinstance(error, ValidationError):
        dialogue.errorlog(f'{error}:')
        for violation in error.violations:
            dialogue.errorlog(violation)

    elif isinstance(error, QuizError):
        dialogue.errorlog(str(error))

    else:
        logging.error('Command failed for %s', dialogue.peer, exc_info=error)
        dialogue.errorlog(str(error) or error.__class__.__name__)
