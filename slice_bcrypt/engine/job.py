"""
Resumable Hash Job
==================
bcrypt as a state machine that can be paused between batches of
key-expansion iterations:

    1. state := InitState()
    2. state := ExpandKey(state, salt, password)
    3. REPEAT 2^cost:
           state := ExpandKey(state, 0, password)
           state := ExpandKey(state, 0, salt)
    4. ctext := "OrpheanBeholderScryDoubt"
    5. REPEAT 64:
           ctext := Encrypt_ECB(state, ctext)
    6. RETURN $2<minor>$<cost>$ + base64(salt) + base64(ctext[:23])

Each call to `resume()` does a bounded amount of work and returns
`Pending` until the final call returns `Done`. Callers that give up on a
job must call `discard()` (or use the job as a context manager) so the
key material is erased.
"""

import uuid
from array import array
from typing import Optional, Tuple, Union

import structlog

from .models import Done, JobState, Pending, SliceResult
from .slicing import SliceController
from ..blowfish.cipher import BlowfishState, stream2word
from ..codec import crypt_string
from ..config import BcryptConfig, get_config
from ..erase import erase_all, secure_erase
from ..exceptions import JobStateError

logger = structlog.get_logger(__name__)

MAGIC = b"OrpheanBeholderScryDoubt"
CIPHER_WORDS = 6
FINAL_ROUNDS = 64
MAX_KEY_BYTES = 72


def password_bytes(password: Union[str, bytes, bytearray]) -> bytearray:
    """Copy a password into a buffer the engine owns."""
    if isinstance(password, str):
        data = bytearray(password.encode("utf-8"))
    elif isinstance(password, (bytes, bytearray, memoryview)):
        data = bytearray(password)
    else:
        raise TypeError("Password must be str or bytes")

    if 0 in data:
        secure_erase(data)
        raise ValueError("Password must not contain NUL bytes")
    return data


def key_material(password: bytearray, minor: str) -> Tuple[bytearray, int]:
    """
    Build the NUL-terminated key buffer and its effective length.

    Minor "a" keeps the legacy 8-bit length (lengths of 255 and up wrap).
    Minor "b" truncates to 72 bytes before counting the terminator.
    """
    if minor == "b":
        length = min(len(password), MAX_KEY_BYTES)
        key = password[:length]
        key.append(0)
        return key, length + 1

    key = password[:]
    key.append(0)
    return key, (len(password) + 1) & 0xFF


class HashJob:
    """
    One bcrypt computation, owned by the caller that created it.

    Args:
        password: Password as str (UTF-8 encoded) or bytes
        salt: Salt string ("$2b$12$<22 chars>") or a full crypt string
        config: Engine configuration (defaults to the cached config)
        controller: Slice controller (defaults to one using the config budget)
    """

    def __init__(
        self,
        password: Union[str, bytes, bytearray],
        salt: Union[str, bytes],
        config: Optional[BcryptConfig] = None,
        controller: Optional[SliceController] = None,
    ):
        self.config = config or get_config()
        self.controller = controller or SliceController(
            budget_seconds=self.config.slice_budget_seconds,
        )
        self.id = str(uuid.uuid4())

        self._cipher: Optional[BlowfishState] = None
        self._key: Optional[bytearray] = None
        self._salt: Optional[bytearray] = None

        parsed = crypt_string.decode(salt)
        self.minor = parsed.minor
        self.cost = parsed.cost
        self.rounds = parsed.rounds
        self.progress = 0
        self.batch_size = self.config.initial_batch_size
        self.state = JobState.CREATED

        copy = password_bytes(password)
        try:
            self._key, self._key_len = key_material(copy, self.minor)
        finally:
            secure_erase(copy)
        self._salt = bytearray(parsed.raw_salt)

        logger.debug(
            "bcrypt_job_created",
            job_id=self.id,
            minor=self.minor,
            cost=self.cost,
            rounds=self.rounds,
        )

    @property
    def finished(self) -> bool:
        return self.state is JobState.DONE

    def resume(self) -> SliceResult:
        """
        Run the next bounded piece of work.

        Returns:
            Pending(job) while work remains, Done(crypt_string) at the end

        Raises:
            JobStateError: If the job already finished or was discarded
        """
        if self.state in (JobState.DONE, JobState.DISCARDED):
            raise JobStateError(
                f"Cannot resume a {self.state.value} job",
                value=self.id,
            )

        try:
            if self.state is JobState.CREATED:
                self._setup()
                return Pending(self)

            outcome = self.controller.run(
                self._iteration,
                self.progress,
                self.rounds,
                self.batch_size,
            )
            self.progress = outcome.progress
            self.batch_size = outcome.batch_size
            if not outcome.finished:
                logger.debug(
                    "bcrypt_job_suspended",
                    job_id=self.id,
                    progress=self.progress,
                    rounds=self.rounds,
                    batch_size=self.batch_size,
                )
                return Pending(self)

            self.state = JobState.FINALIZING
            return Done(self._finalize())
        except BaseException:
            logger.warning("bcrypt_job_aborted", job_id=self.id, state=self.state.value)
            self.discard()
            raise

    def _setup(self) -> None:
        self._cipher = BlowfishState.initial()
        self._cipher.expandstate(self._salt, len(self._salt), self._key, self._key_len)
        self.state = JobState.EXPANDING

    def _iteration(self) -> None:
        cipher = self._cipher
        cipher.expand0state(self._key, self._key_len)
        cipher.expand0state(self._salt, len(self._salt))

    def _finalize(self) -> str:
        cdata = array("I", [0] * CIPHER_WORDS)
        ciphertext = bytearray(MAGIC)
        try:
            j = 0
            for i in range(CIPHER_WORDS):
                cdata[i], j = stream2word(ciphertext, len(ciphertext), j)

            for _ in range(FINAL_ROUNDS):
                self._cipher.encrypt(cdata, CIPHER_WORDS // 2)

            for i in range(CIPHER_WORDS):
                word = cdata[i]
                ciphertext[4 * i] = (word >> 24) & 0xFF
                ciphertext[4 * i + 1] = (word >> 16) & 0xFF
                ciphertext[4 * i + 2] = (word >> 8) & 0xFF
                ciphertext[4 * i + 3] = word & 0xFF

            result = crypt_string.render(self.minor, self.cost, self._salt, ciphertext)
            self._erase(ciphertext, cdata)
            self.state = JobState.DONE
        except BaseException:
            erase_all(ciphertext, cdata)
            raise

        logger.debug("bcrypt_job_finished", job_id=self.id, cost=self.cost)
        return result

    def _erase(self, ciphertext=None, cdata=None) -> None:
        if self._cipher is not None:
            self._cipher.erase()
        erase_all(self._key, ciphertext, self._salt, cdata)
        self._cipher = None
        self._key = None
        self._salt = None

    def discard(self) -> None:
        """Erase all key material and cipher state. Safe to call twice."""
        if self.state is JobState.DONE:
            return
        self._erase()
        self.state = JobState.DISCARDED

    def __enter__(self) -> "HashJob":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.discard()

    def __repr__(self) -> str:
        return (
            f"HashJob(id={self.id!r}, state={self.state.value}, cost={self.cost}, "
            f"progress={self.progress}/{self.rounds})"
        )


def resume(job: HashJob) -> SliceResult:
    """Resume a job; see HashJob.resume."""
    return job.resume()


def run_to_completion(job: HashJob) -> str:
    """Resume a job until it is done, without yielding in between."""
    with job:
        while True:
            result = job.resume()
            if isinstance(result, Done):
                return result.crypt_string
