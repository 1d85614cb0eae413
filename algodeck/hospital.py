"""A hospital ward that keeps its patients ordered by severity."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

__all__ = ["MAX_PATIENTS", "HospitalFullError", "Patient", "Hospital", "main"]

MAX_PATIENTS = 100


class HospitalFullError(Exception):
    """Raised when a patient is admitted to a full hospital."""


@dataclass
class Patient:
    """A patient waiting for treatment."""

    patient_id: int
    name: str
    age: int
    severity: int


class Hospital:
    """Patients kept most severe first, up to a fixed capacity."""

    def __init__(self, capacity: int = MAX_PATIENTS) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._patients: list[Patient] = []

    def _reorder(self) -> None:
        # Exchange sort: a later patient that is strictly more severe swaps
        # places with the one at the current position.
        patients = self._patients
        count = len(patients)
        for i in range(count - 1):
            for j in range(i + 1, count):
                if patients[j].severity > patients[i].severity:
                    patients[i], patients[j] = patients[j], patients[i]

    def add(self, patient: Patient) -> None:
        """Admit a patient, keeping the highest severity first."""
        if len(self._patients) >= self.capacity:
            raise HospitalFullError("Hospital is full!")
        self._patients.append(patient)
        self._reorder()

    def treat(self) -> Patient:
        """Remove and return the most severe patient."""
        if not self._patients:
            raise IndexError("No patients to treat.")
        return self._patients.pop(0)

    def render(self) -> str:
        """The ward as a tab-separated table."""
        if not self._patients:
            return "No patients in hospital.\n"
        lines = ["Patients in hospital:", "ID\tName\t\tAge\tSeverity"]
        lines.extend(
            f"{p.patient_id}\t{p.name}\t\t{p.age}\t{p.severity}" for p in self._patients
        )
        return "\n".join(lines) + "\n"

    def __iter__(self) -> Iterator[Patient]:
        return iter(list(self._patients))

    def __len__(self) -> int:
        return len(self._patients)


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _admit(hospital: Hospital) -> None:
    patient_id = _read_int("Enter Patient ID: ")
    words = input("Enter Name: ").split()
    age = _read_int("Enter Age: ")
    severity = _read_int("Enter Disease Severity: ")
    if patient_id is None or not words or age is None or severity is None:
        print("Invalid input!")
        return
    name = words[0]
    try:
        hospital.add(Patient(patient_id, name, age, severity))
    except HospitalFullError as error:
        print(error)
        return
    print(f"Patient {name} added successfully!")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive hospital menu."""
    parser = argparse.ArgumentParser(prog="algodeck-hospital")
    parser.parse_args(argv)
    hospital = Hospital()
    try:
        while True:
            print("\n=== Hospital Management ===")
            print("1. Add Patient")
            print("2. Treat Most Severe Patient")
            print("3. Display Patients")
            print("4. Exit")
            choice = _read_int("Enter choice: ")
            if choice == 1:
                _admit(hospital)
            elif choice == 2:
                try:
                    p = hospital.treat()
                except IndexError as error:
                    print(error)
                else:
                    print(
                        f"Treating patient {p.name} "
                        f"(ID: {p.patient_id}, Severity: {p.severity})"
                    )
            elif choice == 3:
                print(hospital.render(), end="")
            elif choice == 4:
                print("Exiting...")
                break
            else:
                print("Invalid choice!")
    except EOFError:
        print()
    return 0