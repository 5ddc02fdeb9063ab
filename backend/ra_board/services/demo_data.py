"""
Canned users, postings and applications the board starts with.

There is no sign-up: picking one of these users is what "logging in" means.
"""
from datetime import date

from ra_board.models.application import Application, ApplicationStatus
from ra_board.models.posting import JobPosting, PostingStatus, School
from ra_board.models.user import User, UserRole
from ra_board.services.board_store import BoardStore

AVAILABLE_TOPICS = ["NLP", "CV", "RL", "Robotics", "Bioinformatics", "HCI", "Security", "Systems"]
AVAILABLE_SKILLS = ["Python", "C++", "Java", "PyTorch", "TensorFlow", "React", "SQL", "AWS"]

DEMO_USERS = [
    User(
        id="u1",
        name="Dr. Alan Turing",
        role=UserRole.PROFESSOR,
        department="Computer Science",
        bio="Focusing on AI, Logic, and Computability.",
    ),
    User(
        id="u2",
        name="Jane Doe",
        role=UserRole.STUDENT,
        department="Data Science",
        bio="Passionate about NLP and Deep Learning.",
        student_id="120090123",
    ),
    User(id="u3", name="Dr. Fei-Fei Li (Mock)", role=UserRole.PROFESSOR, department="Computer Vision"),
    User(id="u4", name="Dr. John Nash (Mock)", role=UserRole.PROFESSOR, department="Economics"),
    User(
        id="u5",
        name="Wang Lei",
        role=UserRole.STUDENT,
        department="Bioinformatics",
        student_id="121010456",
    ),
    User(id="guest", name="Guest", role=UserRole.GUEST),
]

DEMO_POSTINGS = [
    JobPosting(
        id="1",
        title="Large Language Model Alignment Research",
        professor_id="u1",
        professor_name="Dr. Alan Turing",
        school=School.SDS,
        lab_name="AI Safety Lab",
        status=PostingStatus.OPEN,
        topic_tags=("NLP", "LLM", "RLHF"),
        skill_tags=("Python", "PyTorch", "HuggingFace"),
        description=(
            "We are looking for a motivated RA to work on aligning Large Language "
            "Models (LLMs) with human values.\n\n"
            "### Responsibilities\n"
            "* Implement RLHF pipelines.\n"
            "* Evaluate model outputs for safety and helpfulness.\n"
            "* Collaborate with PhD students.\n"
        ),
        requirements="Strong background in Deep Learning. Experience with Transformers is a plus.",
        subsidy="Weekly stipend; co-authorship in top-tier conferences.",
        headcount=2,
        views=128,
        posted_date=date(2023, 10, 25),
        deadline=date(2023, 11, 15),
    ),
    JobPosting(
        id="2",
        title="Computer Vision for Autonomous Driving",
        professor_id="u3",
        professor_name="Dr. Fei-Fei Li (Mock)",
        school=School.SSE,
        lab_name="Vision Lab",
        status=PostingStatus.COMPETITIVE,
        topic_tags=("CV", "Robotics", "3D Vision"),
        skill_tags=("C++", "CUDA", "OpenCV"),
        description=(
            "Developing real-time object detection algorithms for autonomous "
            "vehicles in adverse weather conditions."
        ),
        requirements="Proficiency in C++ and CUDA. Coursework in Computer Vision.",
        subsidy="Hourly pay per university RA scale.",
        headcount=1,
        views=342,
        posted_date=date(2023, 10, 20),
        deadline=date(2023, 11, 1),
    ),
    JobPosting(
        id="3",
        title="Reinforcement Learning in Finance",
        professor_id="u4",
        professor_name="Dr. John Nash (Mock)",
        school=School.SME,
        lab_name="Econ-CS Group",
        status=PostingStatus.CLOSED,
        topic_tags=("RL", "Finance", "Game Theory"),
        skill_tags=("Python", "Pandas", "Stochastic Calculus"),
        description="Applying Multi-Agent RL to simulate market dynamics.",
        requirements="Strong math background.",
        headcount=1,
        views=57,
        posted_date=date(2023, 9, 15),
    ),
    JobPosting(
        id="4",
        title="Bioinformatics: Protein Folding Prediction",
        professor_id="u1",
        professor_name="Dr. Alan Turing",
        school=School.SDS,
        lab_name="AI Safety Lab",
        status=PostingStatus.OPEN,
        topic_tags=("Bioinformatics", "Deep Learning"),
        skill_tags=("Python", "TensorFlow", "Biology"),
        description="Using Graph Neural Networks to predict protein structures.",
        requirements="Basic understanding of molecular biology.",
        headcount=3,
        views=76,
        posted_date=date(2023, 10, 28),
    ),
]

DEMO_APPLICATIONS = [
    Application(
        id="a1",
        post_id="1",
        student_id="u2",
        student_name="Jane Doe",
        student_school_id="120090123",
        resume_link="https://drive.example.com/jane-doe-cv.pdf",
        statement="I have fine-tuned several transformer models and would love to work on RLHF.",
        status=ApplicationStatus.SUBMITTED,
        applied_date=date(2023, 10, 26),
    ),
    Application(
        id="a2",
        post_id="1",
        student_id="u5",
        student_name="Wang Lei",
        student_school_id="121010456",
        resume_link="https://drive.example.com/wang-lei-cv.pdf",
        statement="Interested in evaluation of model safety.",
        status=ApplicationStatus.INTERVIEW,
        applied_date=date(2023, 10, 27),
    ),
    Application(
        id="a3",
        post_id="4",
        student_id="u5",
        student_name="Wang Lei",
        student_school_id="121010456",
        resume_link="https://drive.example.com/wang-lei-cv.pdf",
        statement="Bioinformatics major with GNN coursework.",
        status=ApplicationStatus.REJECTED,
        rejection_reason="Positions filled by students with wet-lab experience.",
        applied_date=date(2023, 10, 29),
    ),
    Application(
        id="a4",
        post_id="4",
        student_id="u2",
        student_name="Jane Doe",
        student_school_id="120090123",
        resume_link="https://drive.example.com/jane-doe-cv.pdf",
        statement="Keen to apply deep learning to biology.",
        status=ApplicationStatus.VIEWED,
        applied_date=date(2023, 10, 30),
    ),
]


def seed_demo_board(store: BoardStore) -> None:
    store.load(DEMO_USERS, DEMO_POSTINGS, DEMO_APPLICATIONS)
