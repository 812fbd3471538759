"""Structural updates to a workout.

Every operation takes a workout plus target identifiers and returns a new
workout. Unknown identifiers are not an error: a caller may act on a stale
id (for example right after an exercise substitution), so the original
workout is returned unchanged.

Exercise and set ids are only unique within their parent. When the same
(exercise id, set id) pair occurs more than once, the first match in
section, exercise, set order is the one that is changed.
"""

from dataclasses import dataclass, replace

from ..models.workout import SET_FIELDS, Exercise, SetValue, Workout, WorkoutSet


@dataclass(frozen=True)
class SetLocation:
    """Position of a set inside a workout."""

    section_index: int
    exercise_index: int
    set_index: int
    exercise: Exercise
    set: WorkoutSet


def locate(workout: Workout, exercise_id: str, set_id: str) -> SetLocation | None:
    """Find the first set matching the identifier pair."""
    for si, section in enumerate(workout.sections):
        for ei, exercise in enumerate(section.exercises):
            if exercise.id != exercise_id:
                continue
            for ti, workout_set in enumerate(exercise.sets):
                if workout_set.id == set_id:
                    return SetLocation(si, ei, ti, exercise, workout_set)
    return None


def _with_exercise(
    workout: Workout, section_index: int, exercise_index: int, exercise: Exercise
) -> Workout:
    section = workout.sections[section_index]
    exercises = list(section.exercises)
    exercises[exercise_index] = exercise
    sections = list(workout.sections)
    sections[section_index] = replace(section, exercises=tuple(exercises))
    return replace(workout, sections=tuple(sections))


def _with_set(workout: Workout, location: SetLocation, new_set: WorkoutSet) -> Workout:
    sets = list(location.exercise.sets)
    sets[location.set_index] = new_set
    exercise = replace(location.exercise, sets=tuple(sets))
    return _with_exercise(workout, location.section_index, location.exercise_index, exercise)


def parse_set_value(raw_value: str) -> SetValue:
    """Parse user input for a weight or reps field.

    An empty string clears the field. Integral input stays an int.

    Raises:
        ValueError: If the input is not a number
    """
    text = raw_value.strip()
    if text == "":
        return None
    try:
        return int(text)
    except ValueError:
        pass
    value = float(text)
    if value != value or value in (float("inf"), float("-inf")):
        raise ValueError(f"Not a finite number: {raw_value!r}")
    return value


def set_field(
    workout: Workout, exercise_id: str, set_id: str, field: str, raw_value: str
) -> Workout:
    """Set ``weight`` or ``reps`` of a set from raw user input."""
    if field not in SET_FIELDS:
        raise ValueError(f"Unknown set field: {field!r}")
    location = locate(workout, exercise_id, set_id)
    if location is None:
        return workout
    value = parse_set_value(raw_value)
    return _with_set(workout, location, replace(location.set, **{field: value}))


def toggle_completion(workout: Workout, exercise_id: str, set_id: str) -> Workout:
    """Flip the completed flag of a set."""
    location = locate(workout, exercise_id, set_id)
    if location is None:
        return workout
    toggled = replace(location.set, is_completed=not location.set.is_completed)
    return _with_set(workout, location, toggled)


def substitute_exercise(workout: Workout, exercise_id: str, new_name: str) -> Workout:
    """Rename the first exercise with the given id, keeping its sets."""
    for si, section in enumerate(workout.sections):
        for ei, exercise in enumerate(section.exercises):
            if exercise.id == exercise_id:
                return _with_exercise(workout, si, ei, replace(exercise, name=new_name))
    return workout
