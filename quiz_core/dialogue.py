"""
Module for Dialogue class
"""

import logging

from .errors import DialogueAborted

ENCODING = 'utf-8'


class Dialogue:
    """
    Line based conversation with one connected client
    """

    def __init__(self, reader, writer, prompt='quiz > ', prefill=False):
        """
        Arguments:
            reader (asyncio.StreamReader): Client input
            writer (asyncio.StreamWriter): Client output
            prompt (str): Text written whenever a new command is expected
            prefill (bool): Offer the current value as the default reply when
                            asking with a default
        """

        self._reader = reader
        self._writer = writer
        self._prompt = prompt
        self._closed = False
        self.prefill = prefill
        self.peer = writer.get_extra_info('peername')

    @property
    def closed(self):
        return self._closed

    def log(self, text):
        self._write(f'{text}\n')

    def errorlog(self, text):
        self._write(f'Error: {text}\n')

    def ready(self):
        """Tell the client the previous command is done"""
        self._write(self._prompt)

    async def ask(self, text, default=None):
        """
        Ask the client something and wait for the reply line

        Arguments:
            text (str): Question to show
            default (str or None): Current value, used when prefill is on and
                                   the reply is empty

        Returns:
            str: The reply with surrounding whitespace removed
        """

        use_default = self.prefill and default is not None
        if use_default:
            text = f'{text}[{default}] '

        self._write(text)
        await self._drain()
        reply = await self.read_line()

        if use_default and reply == '':
            return default

        return reply

    async def read_line(self):
        if self._closed:
            raise DialogueAborted()

        try:
            line = await self._reader.readline()
        except (ConnectionError, ValueError) as ex:
            raise DialogueAborted(str(ex)) from ex

        if not line.endswith(b'\n'):
            # EOF before a full line
            raise DialogueAborted()

        return line.decode(ENCODING, errors='replace').strip()

    async def close(self):
        if self._closed:
            return

        self._closed = True
        logging.debug('Closing dialogue with %s', self.peer)
        try:
            await self._drain()
            self._writer.close()
            await self._writer.wait_closed()
        except (ConnectionError, DialogueAborted) as ex:
            logging.debug('Connection to %s already gone: %s', self.peer, ex)

    def _write(self, text):
        if self._closed or self._writer.is_closing():
            return

        self._writer.write(text.encode(ENCODING))

    async def _drain(self):
        if self._writer.is_closing():
            return

        try:
            await self._writer.drain()
        except ConnectionError as ex:
            raise DialogueAborted(str(ex)) from ex
