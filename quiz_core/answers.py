"""
Answer checking for test and play
"""


def check_answer(answer, correct_answer):
    """
    Accept the answer when it equals the stored one, ignoring case and
    surrounding whitespace
    """

    return answer.strip().lower() == correct_answer.strip().lower()
