"""
Prompt templates for lesson generation and upload analysis.
Placeholders use string.Template syntax so the JSON braces stay literal.
"""

from string import Template

SYSTEM_ROLE_DEFINITION = """
You are ASman, an AI teaching assistant for Indian classrooms.
You write lesson packs that teachers can read aloud and use directly.
Always reply with the exact structure you are asked for.
"""

LESSON_JSON_STRUCTURE = """
{
  "lessonTitle": "Professional lesson title",
  "ageGroup": "Age range for this class",
  "duration": "Estimated lesson time (15-30 minutes)",
  "introduction": {
    "hook": "Engaging opening statement (50 words)",
    "objective": "What students will learn today"
  },
  "explanation": {
    "mainContent": "Detailed explanation in simple language (200 words)",
    "keyPoints": ["Point 1", "Point 2", "Point 3"],
    "examples": "Real-life Indian examples and analogies"
  },
  "interactiveSection": {
    "questions": [
      {
        "question": "Clear, simple question",
        "options": ["Option A", "Option B", "Option C", "Option D"],
        "correct": 0,
        "explanation": "Why this answer is correct"
      }
    ],
    "participation": "How students can participate actively"
  },
  "handsonActivity": {
    "title": "Activity name",
    "materials": "Simple materials available in Indian classrooms",
    "steps": ["Step 1", "Step 2", "Step 3"],
    "timeNeeded": "5-10 minutes"
  },
  "globalMethod": {
    "style": "$global_style",
    "application": "How this global teaching method enhances the lesson",
    "culturalBridge": "How it connects with Indian learning traditions"
  },
  "conclusion": {
    "summary": "Lesson recap (50 words)",
    "homework": "Simple take-home activity",
    "nextLesson": "What comes next in learning journey"
  },
  "languageSupport": {
    "hindiKeyTerms": {
      "term1": "hindi translation",
      "term2": "hindi translation",
      "term3": "hindi translation"
    },
    "pronunciationGuide": "Key Hindi words with pronunciation"
  },
  "teacherNotes": {
    "tips": "Teaching tips for better delivery",
    "commonMistakes": "What students often get wrong",
    "extensions": "For advanced students"
  }
}
"""

PROFESSIONAL_LESSON_PROMPT = Template("""
Create a comprehensive 500-word lesson pack for Class $class_number on "$topic" in $subject.
Make it professionally structured, culturally relevant to India, and audio-friendly.

IMPORTANT: Format as a well-structured lesson plan that can be read aloud by text-to-speech.
Include exactly three questions in the interactive section.

Structure your response as JSON:
""" + LESSON_JSON_STRUCTURE + """
WORD COUNT: Ensure total content is approximately 500 words.
AUDIO-FRIENDLY: Write in natural speech patterns with clear transitions.
CULTURAL CONTEXT: Include Indian examples, values, and learning traditions.
Age level: $age_range
Teaching style: $global_style
""")

GLOBAL_VERSION_PROMPT = Template("""
You are creating an ENHANCED global lesson for Indian classrooms.

Build upon the Indian foundation with comprehensive international perspectives for Class $class_number on "$topic" in $subject.

Create an 800-word enhanced lesson pack with the same JSON structure but expanded content:
""" + LESSON_JSON_STRUCTURE + """
ENHANCED GLOBAL APPROACH:
- Cross-cultural examples from different countries (USA, UK, China, Japan, Singapore, Finland)
- Global best practices and international educational standards
- Comparative analysis showing different approaches worldwide
- How other countries teach the same concepts

CONTENT REQUIREMENTS:
- Include specific examples from at least 4 different countries
- Provide comparative analysis between Indian and global approaches
- Maintain relevance to Indian students while expanding global awareness
- Include practical ways to implement global best practices in Indian classrooms

Age level: $age_range
Teaching style: $global_style
""")

IMAGE_ANALYSIS_PROMPT = Template("""
Analyze this image file "$file_name" for Class $class_number $subject lessons in Indian schools.

Provide a detailed analysis including:
1. Educational potential and learning objectives
2. Age-appropriate activities that can be created
3. Curriculum alignment with Indian standards
4. Interactive classroom activities
5. Assessment questions that can be generated
6. Cultural relevance for Indian students
7. Integration with existing lesson plans

Be specific, practical, and encouraging for Indian teachers.
""")

TEXT_ANALYSIS_PROMPT = Template("""
Analyze this text content for Class $class_number $subject lessons in Indian schools:

Content: "$content..."

Provide detailed insights:
1. Key concepts that can be extracted for lessons
2. Age-appropriate simplification strategies
3. Interactive activities based on this content
4. Questions and assessments that can be created
5. Cultural connections to Indian context
6. Curriculum standard alignment
7. Practical classroom implementation tips

Be specific and actionable for Indian teachers.
""")

DOCUMENT_ANALYSIS_PROMPT = Template("""
Analyze this document "$file_name" ($content_type) for Class $class_number $subject lessons.

Based on the document type and name, provide:
1. Likely educational content and learning objectives
2. Lesson plan suggestions for Indian classrooms
3. Interactive activities that can be developed
4. Assessment strategies
5. Cultural adaptation for Indian students
6. Technology integration possibilities
7. Teacher preparation recommendations

Focus on practical, implementable suggestions for Indian educators.
""")

AUDIO_ANALYSIS_PROMPT = Template("""
Analyze this audio file "$file_name" for Class $class_number $subject lessons.

Provide analysis for:
1. Audio-based learning activities
2. Listening comprehension exercises
3. Language development opportunities
4. Cultural and musical integration
5. Classroom presentation strategies
6. Student engagement techniques
7. Assessment through audio content

Focus on practical classroom implementation in Indian schools.
""")
