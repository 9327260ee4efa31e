import logging
import os
import tempfile

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Keeps a single integer high score in a text file."""

    def __init__(self, path):
        self.path = path

    def load(self) -> int:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read().strip()
        except FileNotFoundError:
            return 0
        except OSError as e:
            logger.warning("could not read high score from %s: %s", self.path, e)
            return 0
        except UnicodeDecodeError as e:
            logger.warning("ignoring corrupt high score file %s: %s", self.path, e)
            return 0
        if not text:
            return 0
        try:
            return max(0, int(text))
        except ValueError:
            logger.warning("ignoring corrupt high score file %s: %r", self.path, text[:32])
            return 0

    def save(self, value: int):
        folder = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(folder, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=".highscore-", dir=folder)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(str(int(value)))
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise


class ScoreKeeper:
    def __init__(self, store=None, high_score=None):
        self.store = store
        if high_score is None:
            high_score = store.load() if store is not None else 0
        self.high_score = max(0, int(high_score))
        self.score = 0
        self.last_save_error = None

    def reset(self):
        self.score = 0

    def on_bounces(self, n: int):
        if n > 0:
            self.score += n
        return self.score

    def on_session_end(self, final_score: int) -> bool:
        if final_score <= self.high_score:
            return False
        self.high_score = final_score
        logger.info("new high score: %d", final_score)
        if self.store is not None:
            try:
                self.store.save(final_score)
                self.last_save_error = None
            except (OSError, ValueError) as e:
                self.last_save_error = e
                logger.warning("could not save high score %d: %s", final_score, e)
        return True
