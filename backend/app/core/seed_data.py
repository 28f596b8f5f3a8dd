"""Seed Data — example projects and skills inserted into empty tables at startup.

Payloads are raw dicts in wire (camelCase) form so they pass through the same
insert-schema validation as any API write.
"""

SEED_PROJECTS: list[dict] = [
    {
        "title": "Neural Architecture Search Engine",
        "shortDescription": "Automated ML model optimization system.",
        "problemStatement": (
            "Designing efficient neural network architectures for edge devices "
            "manually is time-consuming and suboptimal."
        ),
        "methodology": (
            "Implemented a reinforcement learning agent using PyTorch to traverse "
            "the search space of operations. Used weight sharing to reduce "
            "training cost by 90%."
        ),
        "outcome": (
            "Achieved 2.5x speedup in inference on Raspberry Pi 4 with <1% "
            "accuracy loss compared to ResNet-50."
        ),
        "techStack": ["Python", "PyTorch", "Ray Tune", "Docker"],
        "githubUrl": "https://github.com/example/nas-engine",
        "demoUrl": "https://nas-demo.example.com",
        "imageUrl": "https://images.unsplash.com/photo-1620712943543-bcc4688e7485?auto=format&fit=crop&q=80&w=1000",
    },
    {
        "title": "Distributed Log Anomaly Detection",
        "shortDescription": "Real-time anomaly detection for microservices.",
        "problemStatement": (
            "Detecting system failures in terabytes of distributed logs in "
            "real-time is impossible with rule-based systems."
        ),
        "methodology": (
            "Built a streaming pipeline with Apache Kafka and Flink. Trained a "
            "Transformer-based autoencoder on normal log sequences to flag "
            "deviations."
        ),
        "outcome": (
            "Reduced MTTR (Mean Time To Resolution) by 40% in a simulated "
            "production environment. Handles 50k logs/sec."
        ),
        "techStack": ["Scala", "Apache Flink", "Kafka", "TensorFlow", "Kubernetes"],
        "githubUrl": "https://github.com/example/log-anomaly",
        "demoUrl": None,
        "imageUrl": "https://images.unsplash.com/photo-1551288049-bebda4e38f71?auto=format&fit=crop&q=80&w=1000",
    },
    {
        "title": "Semantic Code Search",
        "shortDescription": "Natural language search for large codebases.",
        "problemStatement": (
            "Developers spend 20% of their time searching for code snippets. "
            "Keyword search lacks context."
        ),
        "methodology": (
            "Fine-tuned a CodeBERT model on internal repositories. Indexed "
            "embeddings in Milvus vector database for sub-millisecond retrieval."
        ),
        "outcome": (
            "Improved search relevance by 60% compared to Elasticsearch baseline "
            "in user study."
        ),
        "techStack": ["Python", "Hugging Face", "Milvus", "FastAPI", "React"],
        "githubUrl": "https://github.com/example/semantic-search",
        "demoUrl": None,
        "imageUrl": "https://images.unsplash.com/photo-1555066931-4365d14bab8c?auto=format&fit=crop&q=80&w=1000",
    },
]

SEED_SKILLS: list[dict] = [
    {"name": "Python", "category": "Languages", "proficiency": 95},
    {"name": "C++", "category": "Languages", "proficiency": 85},
    {"name": "TypeScript", "category": "Languages", "proficiency": 80},
    {"name": "PyTorch", "category": "Machine Learning", "proficiency": 90},
    {"name": "TensorFlow", "category": "Machine Learning", "proficiency": 85},
    {"name": "Scikit-learn", "category": "Machine Learning", "proficiency": 90},
    {"name": "Docker", "category": "Infrastructure", "proficiency": 85},
    {"name": "Kubernetes", "category": "Infrastructure", "proficiency": 75},
    {"name": "AWS", "category": "Infrastructure", "proficiency": 80},
    {"name": "PostgreSQL", "category": "Data", "proficiency": 85},
]
