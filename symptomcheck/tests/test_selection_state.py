from symptomcheck.frontend.utils.charts import predictions_frame
from symptomcheck.frontend.utils.state import CheckerState, filter_symptoms, find_symptom, get_state

SYMPTOMS = ["Chest pain", "cough", "fever", "high fever", "sneezing"]


class FakeSessionState(dict):
    def __getattr__(self, name):
        return self[name]

    def __setattr__(self, name, value):
        self[name] = value


def test_filter_is_case_insensitive_and_ordered():
    assert filter_symptoms(SYMPTOMS, "FEV") == ["fever", "high fever"]
    assert filter_symptoms(SYMPTOMS, "  ") == SYMPTOMS
    assert filter_symptoms(SYMPTOMS, "pain") == ["Chest pain"]
    assert filter_symptoms(SYMPTOMS, "xyz") == []


def test_find_prefers_exact_match():
    assert find_symptom(SYMPTOMS, "Fever") == "fever"
    assert find_symptom(SYMPTOMS, "igh") == "high fever"
    assert find_symptom(SYMPTOMS, "chest") == "Chest pain"
    assert find_symptom(SYMPTOMS, "") is None
    assert find_symptom(SYMPTOMS, "rash") is None


def test_selection_mutations():
    state = CheckerState(symptoms=list(SYMPTOMS))
    assert not state.can_submit

    state.add("fever")
    state.add("fever")
    state.toggle("cough")
    assert state.selected == ["fever", "cough"]
    assert state.can_submit

    state.toggle("fever")
    state.remove("not selected")
    assert state.selected == ["cough"]

    state.last_outcome = {"state": "ok"}
    state.clear()
    assert state.selected == [] and state.last_outcome is None


def test_state_is_created_once_per_session():
    session = FakeSessionState()
    first = get_state(session)
    first.add("fever")
    assert get_state(session) is first
    assert session["checker_state"].selected == ["fever"]


def test_predictions_frame_rounds_percentages():
    frame = predictions_frame(
        [
            {"disease": "Flu", "match_percentage": 200 / 3},
            {"disease": "Cold", "match_percentage": 50},
        ]
    )
    assert list(frame["disease"]) == ["Flu", "Cold"]
    assert list(frame["label"]) == ["01. Flu", "02. Cold"]
    assert list(frame["match_percentage"]) == [66.7, 50.0]
    assert predictions_frame([]).empty


def test_predictions_frame_labels_sort_in_rank_order():
    predictions = [
        {"disease": name, "match_percentage": 100 - index}
        for index, name in enumerate(["Zika", "Anemia", "Measles", "Asthma", "Dengue", "Cold", "Flu", "Gout", "Mumps", "Acne"])
    ]
    frame = predictions_frame(predictions)

    assert sorted(frame["label"]) == list(frame["label"])
    assert frame["label"].iloc[-1] == "10. Acne"
