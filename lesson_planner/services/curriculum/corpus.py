"""
Curriculum Reference Corpus

Static reference records summarising the Swedish Lgr22 compulsory school
curriculum ("läroplanen"), grades kindergarten (förskoleklass) to 6.

Each record is validated into a ReferenceDocument when the curriculum store
is built. Keep ids unique and stable: ranking ties are broken by id.
"""

KINDERGARTEN = "kindergarten"

CURRICULUM_RECORDS: list[dict] = [
    {
        "id": 1,
        "subject": "Science",
        "grades": [KINDERGARTEN, "1", "2", "3"],
        "keywords": [
            "animals", "habitat", "living environment", "animal species",
            "wild animals", "pets", "birds", "fish", "insects",
        ],
        "content": (
            "Students will develop knowledge about different animal species and their habitats. "
            "Core content covers the different needs of animals, how they move and where they live. "
            "Abilities include observing and describing the characteristics and behaviour of animals."
        ),
        "source": "Lgr22 - Science studies, core content grades 1-3",
        "activities": [
            "Animal observations in the local area with magnifying glasses and binoculars",
            "Create animal cards with pictures and facts about different species",
            "Build a bird box and study bird visits",
            "Animal tracking and footprints in clay",
            "Visit to a zoo or nature centre for animal studies",
            "Act out the movements and sounds of animals",
        ],
        "concept_tags": ["biology", "ecology", "observation", "classification"],
        "pedagogical_level": "concrete",
        "cross_curricular_links": [
            "Swedish (stories about animals)",
            "Art (animal drawing)",
            "Mathematics (counting animals)",
        ],
    },
    {
        "id": 2,
        "subject": "Science",
        "grades": ["3", "4", "5", "6"],
        "keywords": [
            "space", "planets", "solar system", "stars", "astronomy", "the moon", "earth", "universe",
        ],
        "content": (
            "Students will develop an understanding of the earth as a planet in the solar system "
            "and of how the universe is structured. Core content includes the properties of the planets, "
            "the phases of the moon and constellations. Abilities include using models to explain "
            "astronomical phenomena."
        ),
        "source": "Lgr22 - Science studies, core content grades 4-6",
        "activities": [
            "Build a model of the solar system from different materials",
            "Stargazing and identifying constellations",
            "Simulate the phases of the moon with a lamp and balls",
            "Create a space exhibition with planet facts",
            "Visit a planetarium or space observatory",
            "Design and build your own space rockets",
        ],
        "concept_tags": ["astronomy", "physics", "modelling", "reflection"],
        "pedagogical_level": "mixed",
        "cross_curricular_links": [
            "Mathematics (distances and sizes)",
            "Technology (rocket building)",
            "Swedish (science fiction stories)",
        ],
    },
    {
        "id": 3,
        "subject": "Social Studies",
        "grades": ["4", "5", "6"],
        "keywords": [
            "environment", "sustainability", "recycling", "climate", "natural resources",
            "pollution", "environmental impact",
        ],
        "content": (
            "Students will develop knowledge about environmental issues and sustainable development. "
            "Core content deals with the human impact on the environment and measures for sustainability. "
            "Abilities include analysing environmental problems and proposing solutions."
        ),
        "source": "Lgr22 - Social studies, core content grades 4-6",
        "activities": [
            "Environmental audit of the school with suggested improvements",
            "Recycling sorting station in the classroom",
            "Grow your own vegetables in the school garden",
            "Investigate water pollution in the local area",
            "Create an environmental awareness campaign",
            "Visit a recycling plant",
        ],
        "concept_tags": ["sustainability", "environmental science", "social responsibility", "critical thinking"],
        "pedagogical_level": "mixed",
        "cross_curricular_links": [
            "Science (ecosystems)",
            "Swedish (argumentative text)",
            "Mathematics (consumption statistics)",
        ],
    },
    {
        "id": 4,
        "subject": "Social Studies",
        "grades": ["2", "3", "4"],
        "keywords": [
            "history", "prehistory", "middle ages", "cultural heritage", "archaeology", "monuments", "tradition",
        ],
        "content": (
            "Students will develop an understanding of historical time and how people lived in the past. "
            "Core content covers Swedish traditions and cultural heritage. Abilities include using "
            "historical sources and drawing conclusions about the past."
        ),
        "source": "Lgr22 - Social studies, core content grades 1-3",
        "activities": [
            "Create a timeline of Swedish history",
            "Build a medieval castle from cardboard and lego",
            "Dramatise historical events",
            "Interview older people about how things used to be",
            "Visit a museum or historical site",
            "Archaeological dig in the sandpit",
        ],
        "concept_tags": ["chronology", "source criticism", "cultural understanding", "reflection"],
        "pedagogical_level": "concrete",
        "cross_curricular_links": [
            "Swedish (fairy tales and myths)",
            "Art (historical art)",
            "Physical Education (traditional games)",
        ],
    },
    {
        "id": 5,
        "subject": "Science",
        "grades": [KINDERGARTEN, "1", "2"],
        "keywords": ["body", "health", "senses", "emotions", "hygiene", "movement", "sleep"],
        "content": (
            "Students will develop knowledge about their own body and what affects health. "
            "Core content includes the different parts of the body and their functions. "
            "Abilities include describing how the body works and what affects health."
        ),
        "source": "Lgr22 - Science studies, core content grades K-3",
        "activities": [
            "Draw and name body parts on large sheets of paper",
            "Sense tests with different materials and smells",
            "Measure heartbeat before and after exercise",
            "Create a healthy menu with nutritious foods",
            "Hygiene practice with tooth brushing and hand washing",
            "Emotion cards and discussion about different feelings",
        ],
        "concept_tags": ["anatomy", "physiology", "health education", "self-esteem"],
        "pedagogical_level": "concrete",
        "cross_curricular_links": [
            "Physical Education and Health (movement)",
            "Swedish (feelings and words)",
            "Mathematics (measuring length and weight)",
        ],
    },
    {
        "id": 6,
        "subject": "Science",
        "grades": ["1", "2", "3"],
        "keywords": ["food", "nutrition", "groceries", "growing", "cooking", "healthy diet"],
        "content": (
            "Students will develop knowledge about food and nutrition. Core content covers a varied "
            "and nutritious diet. Abilities include planning and carrying out simple cooking."
        ),
        "source": "Lgr22 - Science studies, core content grades 1-3",
        "activities": [
            "Grow herbs and vegetables in pots",
            "Prepare simple food such as sandwiches and fruit salad",
            "Sort foods into nutritional groups",
            "Visit a farm or market square",
            "Create a recipe book with simple dishes",
            "Taste test of different fruits and vegetables",
        ],
        "concept_tags": ["nutrition science", "food culture", "practical application", "sustainability"],
        "pedagogical_level": "concrete",
        "cross_curricular_links": [
            "Mathematics (measurements and weights)",
            "Swedish (recipes and instructions)",
            "Social Studies (food culture)",
        ],
    },
    {
        "id": 7,
        "subject": "Technology",
        "grades": ["2", "3", "4", "5"],
        "keywords": ["transport", "vehicles", "motion", "technology", "inventions", "wheels", "engine"],
        "content": (
            "Students will develop an understanding of technical solutions in transport. Core content "
            "covers how different vehicles work and have developed over time. Abilities include "
            "constructing and testing simple vehicles."
        ),
        "source": "Lgr22 - Technology, core content grades 1-6",
        "activities": [
            "Build and test cars made from recycled materials",
            "Investigate different types of wheels and their properties",
            "Create a timeline of the development of transport",
            "Construct bridges and test their load",
            "Experiment with wind power and sail cars",
            "Visit a technology or car museum",
        ],
        "concept_tags": ["mechanics", "construction", "problem solving", "innovation"],
        "pedagogical_level": "mixed",
        "cross_curricular_links": [
            "Mathematics (measurement and geometry)",
            "Science (physics)",
            "Social Studies (history of transport)",
        ],
    },
    {
        "id": 8,
        "subject": "Swedish",
        "grades": [KINDERGARTEN, "1", "2", "3"],
        "keywords": ["family", "home", "relationships", "stories", "feelings", "traditions"],
        "content": (
            "Students will develop their language skills through texts about family and home. "
            "Core content includes stories and rhymes. Abilities include reading, writing and "
            "talking about their own experiences."
        ),
        "source": "Lgr22 - Swedish, core content grades K-3",
        "activities": [
            "Write and illustrate stories about the family",
            "Family tree with pictures and stories",
            "Interview family members about their childhood",
            "Dramatise family situations",
            "Read books about different kinds of families",
            "Create a family cookbook with favourite recipes",
        ],
        "concept_tags": ["storytelling", "identity", "language development", "cultural understanding"],
        "pedagogical_level": "concrete",
        "cross_curricular_links": [
            "Social Studies (family traditions)",
            "Art (family portraits)",
            "Music (family songs)",
        ],
    },
    {
        "id": 9,
        "subject": "Mathematics",
        "grades": ["1", "2", "3", "4"],
        "keywords": ["geometry", "shapes", "patterns", "symmetry", "measurement", "spatial sense"],
        "content": (
            "Students will develop geometric understanding and spatial awareness. Core content covers "
            "basic geometric shapes and their properties. Abilities include identifying and describing "
            "geometric patterns."
        ),
        "source": "Lgr22 - Mathematics, core content grades 1-3",
        "activities": [
            "Shape hunt in the classroom and outdoors",
            "Build with geometric blocks and shapes",
            "Create symmetrical patterns with mirrors",
            "Measure and compare lengths with different tools",
            "Tangram and other shape puzzles",
            "Geometric art with different materials",
        ],
        "concept_tags": ["spatial reasoning", "pattern recognition", "measurement", "visualisation"],
        "pedagogical_level": "concrete",
        "cross_curricular_links": [
            "Art (geometric design)",
            "Technology (construction)",
            "Physical Education (moving in space)",
        ],
    },
    {
        "id": 10,
        "subject": "Art",
        "grades": [KINDERGARTEN, "1", "2", "3", "4"],
        "keywords": ["art", "creating", "colours", "materials", "expression", "creativity"],
        "content": (
            "Students will develop their creative ability and visual language. Core content covers "
            "different materials and techniques. Abilities include creating and reflecting on their own "
            "and others' pictures."
        ),
        "source": "Lgr22 - Art, core content grades K-6",
        "activities": [
            "Experiment with different painting techniques",
            "Create collages with natural materials",
            "Model with clay and other mouldable materials",
            "Take photographs and create digital stories",
            "Study visit to an art museum or gallery",
            "Create a shared mural for the school",
        ],
        "concept_tags": ["aesthetics", "creativity", "reflection", "cultural understanding"],
        "pedagogical_level": "mixed",
        "cross_curricular_links": [
            "Swedish (visual storytelling)",
            "Science (shapes and colours of nature)",
            "Mathematics (geometric shapes)",
        ],
    },
    {
        "id": 11,
        "subject": "Music",
        "grades": [KINDERGARTEN, "1", "2", "3", "4", "5"],
        "keywords": ["singing", "rhythm", "instruments", "dance", "listening", "composition"],
        "content": (
            "Students will develop musical abilities through singing, playing and listening. "
            "Core content covers different musical styles and cultures. Abilities include making "
            "music and reflecting on music."
        ),
        "source": "Lgr22 - Music, core content grades K-6",
        "activities": [
            "Sing traditional Swedish songs",
            "Build your own instruments from recycled materials",
            "Compose simple melodies and rhythms",
            "Dance to music from different cultures",
            "Listen to classical music and describe what it brings to mind",
            "Create soundscapes with different materials",
        ],
        "concept_tags": ["rhythm", "melody", "cultural diversity", "expression"],
        "pedagogical_level": "concrete",
        "cross_curricular_links": [
            "Swedish (song lyrics and rhymes)",
            "Mathematics (rhythmic patterns)",
            "Physical Education and Health (dance and movement)",
        ],
    },
    {
        "id": 12,
        "subject": "Physical Education and Health",
        "grades": [KINDERGARTEN, "1", "2", "3", "4", "5", "6"],
        "keywords": ["movement", "play", "games", "fitness", "strength", "cooperation", "fair play"],
        "content": (
            "Students will develop their motor skills and an understanding of the importance of "
            "movement for health. Core content covers different forms of movement and games. "
            "Abilities include moving in different ways and following rules."
        ),
        "source": "Lgr22 - Physical education and health, core content grades K-6",
        "activities": [
            "Traditional games such as hide and seek and hopscotch",
            "Obstacle courses with different movement tasks",
            "Ball games and simple team sports",
            "Dance and rhythmic movement",
            "Outdoor activities such as orienteering",
            "Relaxation and mindfulness exercises",
        ],
        "concept_tags": ["motor skills", "cooperation", "health", "understanding rules"],
        "pedagogical_level": "concrete",
        "cross_curricular_links": [
            "Mathematics (time and measurement)",
            "Music (rhythm and dance)",
            "Science (body and health)",
        ],
    },
    {
        "id": 13,
        "subject": "Science",
        "grades": ["3", "4", "5", "6"],
        "keywords": ["weather", "climate", "water cycle", "seasons", "temperature", "precipitation"],
        "content": (
            "Students will develop an understanding of weather and climate. Core content covers the "
            "water cycle and changes in the weather. Abilities include observing and documenting "
            "weather changes."
        ),
        "source": "Lgr22 - Science studies, core content grades 4-6",
        "activities": [
            "Daily weather observation with thermometer and rain gauge",
            "Build a water cycle model in an aquarium",
            "Set up a weather station in the school yard",
            "Study cloud types and what they mean",
            "Experiments with evaporation and condensation",
            "Compare the weather in different places around the world",
        ],
        "concept_tags": ["meteorology", "observation", "data analysis", "systems thinking"],
        "pedagogical_level": "mixed",
        "cross_curricular_links": [
            "Mathematics (charts and statistics)",
            "Geography (climate zones)",
            "Technology (measuring instruments)",
        ],
    },
    {
        "id": 14,
        "subject": "Technology",
        "grades": ["3", "4", "5", "6"],
        "keywords": ["energy", "electricity", "power", "machines", "automation", "sustainable technology"],
        "content": (
            "Students will develop an understanding of energy and technical systems. Core content covers "
            "different forms of energy and technical solutions. Abilities include constructing and "
            "evaluating technical solutions."
        ),
        "source": "Lgr22 - Technology, core content grades 4-6",
        "activities": [
            "Build simple electrical circuit models",
            "Construct wind turbines and solar panels",
            "Experiment with magnetic and electromagnetic force",
            "Build automated systems with simple sensors",
            "Investigate energy efficiency in the home",
            "Design environmentally friendly technical solutions",
        ],
        "concept_tags": ["energy", "automation", "sustainability", "innovation"],
        "pedagogical_level": "abstract",
        "cross_curricular_links": [
            "Science (physics)",
            "Mathematics (measurement and calculation)",
            "Social Studies (environmental technology)",
        ],
    },
    {
        "id": 15,
        "subject": "Swedish",
        "grades": ["4", "5", "6"],
        "keywords": ["reading comprehension", "text analysis", "source criticism", "argumentation", "reflection"],
        "content": (
            "Students will develop reading comprehension and critical thinking. Core content covers "
            "different text types and source criticism. Abilities include analysing and evaluating texts."
        ),
        "source": "Lgr22 - Swedish, core content grades 4-6",
        "activities": [
            "Read and compare news articles from different sources",
            "Write argumentative texts about current issues",
            "Book talks and literature circles",
            "Analyse advertising and its influence",
            "Create your own newspaper or blog",
            "Debate current topics with supporting facts",
        ],
        "concept_tags": ["source criticism", "argumentation", "text analysis", "media literacy"],
        "pedagogical_level": "abstract",
        "cross_curricular_links": [
            "Social Studies (democracy)",
            "Science (scientific method)",
            "Art (visual communication)",
        ],
    },
    {
        "id": 16,
        "subject": "Mathematics",
        "grades": ["4", "5", "6"],
        "keywords": ["statistics", "probability", "charts", "data analysis", "survey", "presentation"],
        "content": (
            "Students will develop the ability to collect, process and present data. Core content covers "
            "tables, charts and simple statistical concepts. Abilities include carrying out surveys and "
            "drawing conclusions."
        ),
        "source": "Lgr22 - Mathematics, core content grades 4-6",
        "activities": [
            "Carry out a survey of classmates' interests",
            "Create charts and graphs from collected data",
            "Analyse statistics from sport and society",
            "Experiment with games of chance and probability",
            "Present results to other classes",
            "Use digital tools for data processing",
        ],
        "concept_tags": ["data analysis", "presentation", "critical thinking", "digital tools"],
        "pedagogical_level": "abstract",
        "cross_curricular_links": [
            "Science (scientific investigations)",
            "Social Studies (social statistics)",
            "Swedish (presenting results)",
        ],
    },
    {
        "id": 17,
        "subject": "Social Studies",
        "grades": ["5", "6"],
        "keywords": ["democracy", "rights", "obligations", "politics", "elections", "participation"],
        "content": (
            "Students will develop an understanding of democratic processes and civic rights. "
            "Core content covers the principles of democracy and student influence. Abilities include "
            "taking part in democratic processes."
        ),
        "source": "Lgr22 - Social studies, core content grades 4-6",
        "activities": [
            "Hold a class election with real voting procedures",
            "Set up a class council with proposals and decisions",
            "Study the Convention on the Rights of the Child and its significance",
            "Interview local politicians about their work",
            "Debate current social issues",
            "Organise a campaign for school improvements",
        ],
        "concept_tags": ["democracy", "citizenship", "influence", "rights"],
        "pedagogical_level": "abstract",
        "cross_curricular_links": [
            "Swedish (argumentative speech)",
            "Mathematics (elections and statistics)",
            "Art (political messages)",
        ],
    },
]
