"""
This module digests many proteins at once, in parallel when asked to.
"""
import itertools
import logging
import multiprocessing
import threading
from typing import Iterable, Optional, Union

from ..config import DigestionConfig
from ..core.sequence import AASequence
from ..workers.worker_init import init_worker, stop_requested
from .digestion import EnzymaticDigestion

logger = logging.getLogger(__name__)


def _digest_protein_worker(protein: AASequence, config: DigestionConfig) -> Optional[list[AASequence]]:
    """
    Digests a single protein. Designed to be called by a multiprocessing Pool.
    """
    if stop_requested():
        return None
    return EnzymaticDigestion(config).digest(protein)


def _as_sequence(protein: Union[str, AASequence]) -> AASequence:
    if isinstance(protein, AASequence):
        return protein
    return AASequence.from_string(protein)


def digest_proteins(
    proteins: Iterable[Union[str, AASequence]],
    config: Optional[DigestionConfig] = None,
    processes: Optional[int] = None,
    stop_event: Optional[threading.Event] = None,
) -> Optional[list[list[AASequence]]]:
    """
    Digests a collection of proteins with the same settings.

    Args:
        proteins: Proteins as AASequence objects or sequence strings.
        config: The digestion settings; the defaults when omitted.
        processes: Worker processes to use. None uses one per CPU, 1 digests
            in the calling process.
        stop_event: Set it to abandon the batch.

    Returns:
        One peptide list per protein, in input order, or None if the batch was
        cancelled.

    Raises:
        ValueError: If a sequence string is malformed.
    """
    config = config or DigestionConfig()
    sequences = [_as_sequence(protein) for protein in proteins]
    logger.info("Digesting %d proteins.", len(sequences))

    if processes == 1 or len(sequences) <= 1:
        digestion = EnzymaticDigestion(config)
        results = []
        for sequence in sequences:
            if stop_event and stop_event.is_set():
                logger.warning("Digestion cancelled after %d of %d proteins.", len(results), len(sequences))
                return None
            results.append(digestion.digest(sequence))
        return results

    if stop_event and stop_event.is_set():
        logger.warning("Digestion cancelled before any protein was digested.")
        return None

    worker_stop = multiprocessing.Event()
    tasks = zip(sequences, itertools.repeat(config))
    with multiprocessing.Pool(processes=processes, initializer=init_worker, initargs=(worker_stop,)) as pool:
        async_result = pool.starmap_async(_digest_protein_worker, tasks)
        while not async_result.ready():
            if stop_event and stop_event.is_set():
                logger.warning("Cancellation received, terminating workers.")
                worker_stop.set()
                pool.terminate()
                pool.join()
                return None
            async_result.wait(timeout=0.1)
        results = async_result.get()

    logger.info("Digested %d proteins into %d peptides.", len(results), sum(len(r) for r in results))
    return results
