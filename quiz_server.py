import json
import asyncio
import logging

from quiz_core import QuizCore, QuizDatabase, Dialogue, DialogueAborted

SUGGESTED_CONFIGS = [
        ('database_path', 'quiz.db'),
        ('host', '127.0.0.1'),
        ('port', 8080),
        ('seed_quizzes', [
            ['Capital of Italy', 'Rome'],
            ['Capital of France', 'Paris'],
            ['Capital of Spain', 'Madrid'],
            ['Capital of Portugal', 'Lisbon'],
        ]),
        ]

WELCOME = "Welcome to the quiz. Type 'help' for the command list."


class QuizServer:

    def __init__(self, config_filename):
        logging.info('Starting QuizServer')
        self._load_config(config_filename)
        self._check_config()
        self._db = QuizDatabase(self._config['database_path'])
        self._db.seed(self._config['seed_quizzes'])
        core_config = {k: v for k, v in self._config.items() if k not in dict(SUGGESTED_CONFIGS)}
        self._core = QuizCore(self._db, **core_config)
        self._server = None
        self._sessions = set()

    @property
    def port(self):
        if self._server is None or not self._server.sockets:
            return None
        return self._server.sockets[0].getsockname()[1]

    def _load_config(self, filename):
        with open(filename, 'r') as fp:
            self._config = json.load(fp)

    def _check_config(self):
        for key, default in SUGGESTED_CONFIGS:
            if key not in self._config:
                logging.warning(
                        '%s not supplied to QuizServer, defaulting to %s',
                        key,
                        repr(default)
                        )
                self._config[key] = default

    def run(self):
        asyncio.run(self._serve())

    async def _serve(self):
        await self.start()
        try:
            await self.serve_forever()
        finally:
            await self.stop()

    async def start(self):
        self._server = await asyncio.start_server(
                self._handle_connection,
                self._config['host'],
                self._config['port'])
        logging.info('Listening on %s:%s', self._config['host'], self.port)

    async def serve_forever(self):
        await self._server.serve_forever()

    async def stop(self):
        if self._server is None:
            return

        self._server.close()
        for dialogue in list(self._sessions):
            await dialogue.close()
        await self._server.wait_closed()
        self._db.close()
        logging.info('QuizServer stopped')

    async def _handle_connection(self, reader, writer):
        dialogue = Dialogue(
                reader,
                writer,
                prompt=self._core.prompt,
                prefill=self._core.edit_prefill)
        self._sessions.add(dialogue)
        logging.info('Client connected: %s', dialogue.peer)

        try:
            dialogue.log(WELCOME)
            dialogue.ready()

            while not dialogue.closed:
                try:
                    line = await dialogue.read_line()
                except DialogueAborted:
                    break

                await self._core.handle_command(dialogue, line)

        except Exception as ex:
            logging.exception(ex)

        finally:
            self._sessions.discard(dialogue)
            await dialogue.close()
            logging.info('Client disconnected: %s', dialogue.peer)
