"""
Demo Content

Deterministic lesson packs and upload analyses served when no language
model is configured or generation fails.
"""

from .constants import (
    GlobalStyle,
    STYLE_DESCRIPTIONS,
    STYLE_BENEFITS,
    class_number,
    age_range_for,
)
from .contracts import LessonRequest, LessonContent, QuizQuestion, UploadAnalysisRequest


def _global_explanation(topic: str, number: str, age_range: str, style: GlobalStyle) -> str:
    return f"""## Enhanced Global Lesson: {topic} for Class {number}
**Duration:** 25-30 minutes | **Age Group:** {age_range}

### 🎯 Learning Objective
Students will understand {topic} through global perspectives and develop cross-cultural awareness while mastering core concepts.

### 📖 Lesson Introduction
Welcome to our exciting journey exploring {topic}! Today we'll discover how students around the world learn about this fascinating subject.

### 📚 Main Content
{topic} is a fundamental concept that connects students globally. In India, we approach this topic with our rich educational traditions, while learning from international best practices.

#### Key Learning Points:
1. **Foundation Concepts**: Understanding the basics of {topic} with Indian examples
2. **Global Connections**: How {topic} is taught and applied worldwide
3. **Cultural Integration**: Connecting local knowledge with international perspectives
4. **Practical Applications**: Real-world uses in Indian and global contexts

#### International Examples
• **China**: Students learn {topic} through systematic practice and repetition
• **Japan**: Emphasis on detailed observation and step-by-step methodology
• **USA**: Question-based exploration and hands-on discovery
• **Europe**: Creative expression and collaborative group activities
• **Singapore**: Integration of technology and traditional methods
• **Finland**: Student-centered approach with emphasis on understanding

### 🎯 Hands-On Activity: Global {topic} Explorer
**Materials Needed:** Chart paper, colored pencils, world map, everyday objects
**Time Required:** 10-15 minutes

**Steps:**
1. Create a {topic} chart showing Indian examples
2. Add international examples from different countries
3. Compare and contrast different approaches
4. Present findings to the class

### 🌍 Global Teaching Method
**Style:** {style.value.capitalize()}
This international teaching approach enhances our lesson by bringing proven methods from around the world while respecting Indian educational values.

**Cultural Connection:** We honor our Indian learning traditions while embracing global best practices to give students the best of both worlds.

### 📝 Lesson Summary
Today we explored {topic} through both Indian and international lenses, discovering how this concept connects us to students worldwide while building strong foundational knowledge.

**Take-Home Activity:** Research how {topic} is used in one other country and share with the class tomorrow
**Next Lesson Preview:** We'll dive deeper into advanced applications of {topic}

### 👨‍🏫 Teacher Notes
**Teaching Tips:** Use visual aids and encourage students to share their own cultural examples
**Common Student Mistakes:** Watch for confusion between local and global applications
**For Advanced Students:** Encourage research into international educational systems

### 🗣️ Student Participation
Students actively engage through questioning, group discussions, and hands-on exploration while connecting with global perspectives."""


def _base_explanation(topic: str, number: str, age_range: str, style: GlobalStyle) -> str:
    return f"""## {topic} Lesson for Class {number}
**Duration:** 20-25 minutes | **Age Group:** {age_range}

### 🎯 Learning Objective
Students will understand the fundamentals of {topic} and be able to apply this knowledge in their daily lives.

### 📖 Lesson Introduction
Welcome to our exciting lesson on {topic}! This is a wonderful topic that will help you understand the world around you better.

### 📚 Main Content
{topic} is an important concept that we use every day. Let's explore it together using examples from our Indian culture and daily life.

#### Key Learning Points:
1. **Basic Understanding**: What {topic} means and why it's important
2. **Indian Examples**: How we see {topic} in our daily life in India
3. **Practical Uses**: Where and how we use {topic}

#### Real-Life Examples
In India, we can see {topic} everywhere - from our festivals to our daily routines. For example, during Diwali, we use mathematical concepts for rangoli patterns, or in cooking, we use measurements and proportions.

### 🎯 Hands-On Activity: Discover {topic}
**Materials Needed:** Paper, pencils, everyday classroom objects
**Time Required:** 8-10 minutes

**Steps:**
1. Observe examples of {topic} around the classroom
2. Work in pairs to identify more examples
3. Share discoveries with the class

### 🌍 Global Teaching Method
**Style:** {style.value.capitalize()}
{STYLE_DESCRIPTIONS[style]} This approach helps students learn more effectively while respecting Indian educational values.

### 📝 Lesson Summary
Today we learned about {topic} and discovered how it connects to our daily lives. Remember to look for examples of {topic} around you!

**Take-Home Activity:** Find three examples of {topic} at home and draw them
**Next Lesson Preview:** We'll explore more advanced concepts related to {topic}

### 👨‍🏫 Teacher Notes
**Teaching Tips:** Use local examples and encourage student participation
**Common Student Mistakes:** Students may confuse basic concepts - provide clear examples
**For Advanced Students:** Encourage them to find more complex examples

### 🗣️ Student Participation
Students participate through observation, discussion, and hands-on activities that make learning fun and memorable."""


def demo_lesson(request: LessonRequest) -> LessonContent:
    topic = request.topic
    style = request.global_style
    number = class_number(request.class_level)
    age_range = age_range_for(request.class_level)
    is_global = request.is_global_version

    if is_global:
        explanation = _global_explanation(topic, number, age_range, style)
        third_question = QuizQuestion(
            question=f"How do students in other countries learn about {topic}?",
            options=["Same as India", "Different methods worldwide", "Only in English", "Not taught elsewhere"],
            correct=1,
            explanation="Different countries use various creative methods to teach the same concepts.",
        )
    else:
        explanation = _base_explanation(topic, number, age_range, style)
        third_question = QuizQuestion(
            question=f"What makes {topic} interesting to learn?",
            options=["It's boring", "It's challenging but fun", "Too difficult", "Not useful"],
            correct=1,
            explanation="Learning is most effective when it's both challenging and enjoyable.",
        )

    questions = [
        QuizQuestion(
            question=f"What is the main concept we're learning about {topic}?",
            options=["Basic understanding", "Advanced concepts", "Historical facts", "Fun activities"],
            correct=0,
            explanation="We start with basic understanding to build a strong foundation.",
        ),
        QuizQuestion(
            question=f"How can we apply {topic} in daily life?",
            options=["Only in school", "At home and school", "Never needed", "Only for exams"],
            correct=1,
            explanation="Learning is most effective when we can apply it both at home and school.",
        ),
        third_question,
    ]

    hindi_translation = {
        topic: f"{topic} (विषय)",
        "learning": "सीखना",
        "students": "छात्र",
        "activity": "गतिविधि",
        "example": "उदाहरण",
    }
    if is_global:
        hindi_translation.update({
            "global": "वैश्विक",
            "international": "अंतर्राष्ट्रीय",
            "culture": "संस्कृति",
            "world": "संसार",
        })

    activity = (
        f"**Discover {topic} Around Us**\n\n"
        "**Materials:** Chart paper, colored pencils, everyday objects\n\n"
        "**Instructions:**\n"
        f"1. Look around the classroom for examples of {topic}\n"
        "2. Work with a partner to create a list\n"
        "3. Draw your favorite example\n"
        "4. Share with the class and explain why you chose it\n\n"
        "**Learning Goal:** Connect classroom learning with real-world applications"
    )

    global_method = (
        f"**{style.value.capitalize()} Teaching Approach**\n\n"
        f"{STYLE_DESCRIPTIONS[style]}\n\n"
        f"This method helps students learn more effectively by {STYLE_BENEFITS[style]}."
    )

    return LessonContent(
        explanation=explanation,
        questions=questions,
        activity=activity,
        global_method=global_method,
        hindi_translation=hindi_translation,
        is_global_version=is_global,
        lesson_data={
            "lessonTitle": f"{topic} for Class {number}",
            "ageGroup": age_range,
            "duration": "25-30 minutes" if is_global else "20-25 minutes",
        },
        source="demo",
    )


_DEMO_ANALYSIS = {
    "image": """📸 **Image Analysis for Class {number} {subject}**

**Educational Potential:**
• Visual learning enhancement for {subject_id} concepts
• Perfect for creating engaging classroom discussions
• Can be used for observation-based activities
• Supports visual learners in your classroom

**Suggested Activities:**
1. **Observation Exercise**: Students describe what they see and connect to {subject_id} concepts
2. **Question Generation**: Create "What if?" scenarios based on the image
3. **Cultural Connection**: Relate image content to Indian context and daily life
4. **Creative Writing**: Use as inspiration for stories or explanations

**Implementation Tips:**
• Display on classroom projector or print for group work
• Encourage students to share their observations in both English and Hindi
• Connect to real-life examples from students' experiences""",

    "audio": """🎵 **Audio Analysis for Class {number} {subject}**

**Educational Potential:**
• Excellent for auditory learners and listening skills
• Can enhance pronunciation and language development
• Supports multi-sensory learning approach

**Suggested Activities:**
1. **Listening Comprehension**: Create questions about audio content
2. **Sound Identification**: Students identify and categorize sounds
3. **Cultural Integration**: Connect audio to Indian music, languages, or sounds

**Implementation Tips:**
• Ensure good classroom acoustics for clear playback
• Provide transcripts for students with hearing difficulties
• Use audio in short segments for better attention""",

    "document": """📄 **Document Analysis for Class {number} {subject}**

**Educational Potential:**
• Rich source material for comprehensive lesson development
• Can provide structured content for multiple class sessions
• Excellent for developing reading and comprehension skills

**Suggested Activities:**
1. **Content Extraction**: Identify key concepts for lesson planning
2. **Comprehension Exercises**: Create reading activities with questions
3. **Summary Writing**: Students practice summarization skills

**Implementation Tips:**
• Break content into age-appropriate segments
• Create visual aids to support text content
• Provide Hindi translations for key terms""",
}

_DEMO_ANALYSIS_FOOTER = """

**Next Steps:**
✅ Use this analysis to create targeted lesson plans
✅ Develop interactive activities based on the content
✅ Create assessment materials aligned with curriculum

**Cultural Integration:**
🇮🇳 Connect content to Indian festivals, traditions, and daily life
🗣️ Provide Hindi translations for key concepts
📚 Align with NCERT/CBSE curriculum standards"""


def demo_upload_analysis(request: UploadAnalysisRequest) -> str:
    if "image" in request.content_type:
        kind = "image"
    elif "audio" in request.content_type:
        kind = "audio"
    else:
        kind = "document"

    subject_id = request.subject.value
    body = _DEMO_ANALYSIS[kind].format(
        number=class_number(request.class_level),
        subject=subject_id.capitalize(),
        subject_id=subject_id,
    )
    return body + _DEMO_ANALYSIS_FOOTER
