"""
Shared test fixtures.

Provides in-memory stand-ins for the two external collaborators of the
feedback pipeline: a Firestore-shaped async document store and an
AsyncOpenAI-shaped provider client. Neither touches the network.
"""
import copy
import uuid
import httpx
import openai
import pytest

PROVIDER_URL = "https://openrouter.ai/api/v1/chat/completions"


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data)


class FakeDocumentReference:
    def __init__(self, store, collection, doc_id):
        self._store = store
        self._collection = collection
        self.id = doc_id

    async def set(self, data):
        self._store.write_attempts += 1
        if self._store.fail_writes is not None:
            raise self._store.fail_writes
        self._store.collections.setdefault(self._collection, {})[self.id] = copy.deepcopy(data)

    async def get(self):
        self._store.reads += 1
        return FakeSnapshot(self.id, self._store.collections.get(self._collection, {}).get(self.id))


OPERATORS = {
    "==": lambda a, b: a == b,
    "!=": lambda a, b: a != b,
}


class FakeQuery:
    def __init__(self, store, collection, filters=(), order=None, limit_to=None):
        self._store = store
        self._collection = collection
        self._filters = filters
        self._order = order
        self._limit = limit_to

    def _copy(self, **changes):
        params = dict(filters=self._filters, order=self._order, limit_to=self._limit)
        params.update(changes)
        return FakeQuery(self._store, self._collection, **params)

    def where(self, *, filter):
        return self._copy(filters=self._filters + ((filter.field_path, filter.op_string, filter.value),))

    def order_by(self, field, direction="ASCENDING"):
        return self._copy(order=(field, direction))

    def limit(self, count):
        return self._copy(limit_to=count)

    async def stream(self):
        self._store.reads += 1
        docs = list(self._store.collections.get(self._collection, {}).items())
        docs = [
            (doc_id, data) for doc_id, data in docs
            if all(field in data and OPERATORS[op](data[field], value) for field, op, value in self._filters)
        ]
        if self._order:
            field, direction = self._order
            docs.sort(key=lambda item: item[1].get(field), reverse=direction == "DESCENDING")
        if self._limit is not None:
            docs = docs[:self._limit]
        for doc_id, data in docs:
            yield FakeSnapshot(doc_id, copy.deepcopy(data))


class FakeCollection(FakeQuery):
    def __init__(self, store, collection):
        super().__init__(store, collection)

    def document(self, doc_id=None):
        return FakeDocumentReference(self._store, self._collection, doc_id or uuid.uuid4().hex[:20])

    async def add(self, data):
        ref = self.document()
        await ref.set(data)
        return None, ref


class FakeFirestore:
    """In-memory async document store with call counters."""

    def __init__(self):
        self.collections = {}
        self.write_attempts = 0
        self.reads = 0
        self.fail_writes = None

    def collection(self, name):
        return FakeCollection(self, name)

    def docs(self, name):
        return self.collections.get(name, {})

    @property
    def calls(self):
        return self.write_attempts + self.reads


class FakeProviderClient:
    """Stands in for AsyncOpenAI: answers post() with a canned httpx.Response or raises."""

    def __init__(self, payload=None, status_code=200, text=None, exc=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text
        self.exc = exc
        self.calls = []

    async def post(self, path, *, cast_to, body=None, **kwargs):
        self.calls.append({"path": path, "cast_to": cast_to, "body": body})
        if self.exc is not None:
            raise self.exc
        request = httpx.Request("POST", PROVIDER_URL)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text, request=request)
        return httpx.Response(self.status_code, json=self.payload, request=request)


def connection_error():
    return openai.APIConnectionError(request=httpx.Request("POST", PROVIDER_URL))

def status_error(status_code=500, text="upstream unavailable"):
    response = httpx.Response(status_code, text=text, request=httpx.Request("POST", PROVIDER_URL))
    return openai.APIStatusError(f"Error code: {status_code}", response=response, body=None)

def chat_envelope(content):
    return {"id": "gen-1", "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


VALID_FEEDBACK = {
    "totalScore": 78,
    "categoryScores": [
        {"name": "Communication Skills", "score": 80, "comment": "Clear and structured answers."},
        {"name": "Technical Knowledge", "score": 75, "comment": "Solid grasp of backend fundamentals."},
        {"name": "Problem Solving", "score": 72, "comment": "Reasonable approach, missed edge cases."},
        {"name": "Cultural Fit", "score": 85, "comment": "Collaborative and curious."},
        {"name": "Confidence and Clarity", "score": 78, "comment": "Calm delivery throughout."},
    ],
    "strengths": ["Structured answers", "Backend experience"],
    "areasForImprovement": ["Quantify impact", "Discuss trade-offs"],
    "finalAssessment": "A capable backend engineer who should practice discussing trade-offs.",
}

TRANSCRIPT = [
    {"role": "assistant", "content": "Tell me about yourself"},
    {"role": "user", "content": "I am a backend engineer"},
]


@pytest.fixture
def firestore():
    return FakeFirestore()

@pytest.fixture
def valid_feedback():
    return copy.deepcopy(VALID_FEEDBACK)

@pytest.fixture
def transcript():
    return copy.deepcopy(TRANSCRIPT)

@pytest.fixture
def feedback_request(transcript):
    return {"interviewId": "interview-1", "userId": "user-1", "transcript": transcript}
