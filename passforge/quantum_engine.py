"""
Quantum engine: prepares qubits in superposition, measures them in
alternating bases on a local simulator and returns the raw bits.
"""

from __future__ import annotations

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import DEFAULT_CONFIG, PasswordConfig


class QuantumEngine:
    """
    Runs one fixed circuit per call, one shot each time.
    """

    def __init__(self, config: PasswordConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.backend = AerSimulator()

        backend_cfg = self.backend.configuration()
        max_qubits = getattr(backend_cfg, "num_qubits", None)
        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits})."
            )

        self.circuit = self._build_circuit(self.config.num_qubits)
        # The circuit never changes, so transpile it once.
        self._compiled = transpile(self.circuit, self.backend)

    @staticmethod
    def _build_circuit(n: int) -> QuantumCircuit:
        """
        Hadamard on every qubit, then measure even qubits in the Z basis
        and odd qubits in the X basis (an extra H before measuring).
        """
        qc = QuantumCircuit(n, n)
        for i in range(n):
            qc.h(i)
        for i in range(n):
            if i % 2 == 1:
                qc.h(i)
            qc.measure(i, i)
        return qc

    def get_raw_bits(self) -> list[int]:
        result = self.backend.run(self._compiled, shots=1).result()
        counts = result.get_counts()

        # counts looks like {'0101...': 1}; qiskit orders the string
        # q_(n-1) ... q_0, so reverse it to put qubit 0 first.
        bitstring = next(iter(counts))[::-1]
        return [int(b) for b in bitstring]
