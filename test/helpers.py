import asyncio

from quiz_core import Dialogue, QuizDatabase


class FakeWriter:
    """Stands in for asyncio.StreamWriter and keeps everything written"""

    def __init__(self):
        self.data = bytearray()
        self.closed = False

    def write(self, data):
        self.data.extend(data)

    async def drain(self):
        pass

    def close(self):
        self.closed = True

    def is_closing(self):
        return self.closed

    async def wait_closed(self):
        pass

    def get_extra_info(self, name, default=None):
        return ('127.0.0.1', 50000) if name == 'peername' else default

    @property
    def text(self):
        return self.data.decode('utf-8')

    @property
    def lines(self):
        return self.text.split('\n')


def make_dialogue(*replies, eof=True, prefill=False):
    """
    Dialogue whose client has already typed the given lines.
    Must be called with a running event loop.
    """

    reader = asyncio.StreamReader()
    for reply in replies:
        reader.feed_data(f'{reply}\n'.encode('utf-8'))
    if eof:
        reader.feed_eof()

    writer = FakeWriter()
    return Dialogue(reader, writer, prompt='quiz > ', prefill=prefill), writer


def make_database(*quizzes):
    database = QuizDatabase(':memory:')
    for question, answer in quizzes:
        database.create(question, answer)
    return database
