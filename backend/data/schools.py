"""
Built-in catalog of 100 Hong Kong primary schools.

The first 10 records are hand-authored. The remaining 90 are generated
deterministically from a name list so that rankings run 11..100 and
deadlines spread across October to December 2024.

Read-only: loaded once at startup by services.catalog.
"""
from typing import List

from constants import Curriculum, SchoolType
from models.school import School


_FEATURED = [
    {
        'id': 'dbs',
        'name': "Diocesan Boys' School Primary Division",
        'nameZh': "拔萃男書院附屬小學",
        'location': "131 Argyle Street, Mong Kok",
        'district': "Kowloon City (九龍城區)",
        'tuitionFee': "HK$53,930 / yr",
        'curriculum': [Curriculum.DSE, Curriculum.IB],
        'language': ["English"],
        'type': SchoolType.DSS,
        'ranking': 1,
        'categoryRanking': 1,
        'applicationStart': "2024-08-30",
        'applicationEnd': "2024-11-15",
        'interviewDate': "October - November",
        'description': "Top tier boys' school known for academic and sports excellence.",
        'website': "https://www.dbspd.edu.hk/",
        'interviewRequirements': "Confidence, storytelling, and artistic/sports potential.",
        'interviewTips': "Focuses on independence and father-son relationship in final rounds.",
    },
    {
        'id': 'dgs',
        'name': "Diocesan Girls' Junior School",
        'nameZh': "拔萃女小學",
        'location': "1 Jordan Road, Jordan",
        'district': "Yau Tsim Mong (油尖旺區)",
        'tuitionFee': "HK$75,000 / yr",
        'curriculum': [Curriculum.DSE],
        'language': ["English"],
        'type': SchoolType.PRIVATE,
        'ranking': 2,
        'categoryRanking': 1,
        'applicationStart': "2024-08-20",
        'applicationEnd': "2024-11-20",
        'interviewDate': "September - October",
        'description': "Prestigious girls' school producing top results consistently.",
        'website': "https://www.dgjs.edu.hk/",
        'interviewRequirements': "Exceptional English, etiquette, and logical thinking.",
        'interviewTips': "Looks for gentle yet confident girls with strong family values.",
    },
    {
        'id': 'spcc',
        'name': "St. Paul's Co-educational College Primary School",
        'nameZh': "聖保羅男女中學附屬小學",
        'location': "11 Nam Fung Path, Wong Chuk Hang",
        'district': "Southern (南區)",
        'tuitionFee': "HK$63,000 / yr",
        'curriculum': [Curriculum.DSE, Curriculum.IB],
        'language': ["English", "Putonghua"],
        'type': SchoolType.DSS,
        'ranking': 3,
        'categoryRanking': 2,
        'applicationStart': "2024-09-01",
        'applicationEnd': "2024-11-30",
        'interviewDate': "October - December",
        'description': "The most academic-oriented school in Hong Kong.",
        'website': "https://www.spccps.edu.hk/",
        'interviewRequirements': "Advanced logical reasoning and bilingual fluency.",
        'interviewTips': "Tests child's reaction to unknown scenarios; no prior drilling expected.",
    },
    {
        'id': 'la-salle',
        'name': "La Salle Primary School",
        'nameZh': "喇沙小學",
        'location': "1D La Salle Road, Kowloon Tong",
        'district': "Kowloon City (九龍城區)",
        'tuitionFee': "Aided (Free)",
        'curriculum': [Curriculum.DSE],
        'language': ["English", "Cantonese"],
        'type': SchoolType.AIDED,
        'ranking': 4,
        'categoryRanking': 2,
        'applicationStart': "2024-09-20",
        'applicationEnd': "2024-12-15",
        'interviewDate': "November (Allocation)",
        'description': "Iconic Catholic school for boys with a massive alumni network.",
        'website': "https://www.lasalle.edu.hk/",
        'interviewRequirements': "Discipline, social skills, and basic literacy.",
        'interviewTips': "Selection is mostly via Government Allocation system.",
    },
    {
        'id': 'maryknoll',
        'name': "Maryknoll Convent School (Primary Section)",
        'nameZh': "瑪利諾修院學校（小學部）",
        'location': "130 Waterloo Road, Kowloon Tong",
        'district': "Kowloon City (九龍城區)",
        'tuitionFee': "Aided (Free)",
        'curriculum': [Curriculum.DSE],
        'language': ["English", "Cantonese"],
        'type': SchoolType.AIDED,
        'ranking': 5,
        'categoryRanking': 3,
        'applicationStart': "2024-09-23",
        'applicationEnd': "2024-12-10",
        'interviewDate': "November",
        'description': "A heritage girls school with a focus on holistic development.",
        'website': "https://www.mcsps.edu.hk/",
        'interviewRequirements': "English reading, polite behavior, and general knowledge.",
        'interviewTips': "Traditional values are highly respected during interactions.",
    },
    {
        'id': 'sjc',
        'name': "St. Joseph's Primary School",
        'nameZh': "聖若瑟小學",
        'location': "77 Wood Road, Wan Chai",
        'district': "Wan Chai (灣仔區)",
        'tuitionFee': "Aided (Free)",
        'curriculum': [Curriculum.DSE],
        'language': ["English"],
        'type': SchoolType.AIDED,
        'ranking': 6,
        'categoryRanking': 4,
        'applicationStart': "2024-09-23",
        'applicationEnd': "2024-12-25",
        'interviewDate': "Late November",
        'description': "Prestigious Catholic boys school in the heart of Wan Chai.",
        'website': "https://www.sjps.edu.hk/",
        'interviewRequirements': "Teamwork, instruction following, and basic English.",
        'interviewTips': "Favors active boys with sports or music interests.",
    },
    {
        'id': 'cis',
        'name': "Chinese International School",
        'nameZh': "漢基國際學校",
        'location': "1 Hau Yuen Path, Braemar Hill",
        'district': "Eastern (東區)",
        'tuitionFee': "HK$250,000+ / yr",
        'curriculum': [Curriculum.IB],
        'language': ["English", "Putonghua"],
        'type': SchoolType.INTERNATIONAL,
        'ranking': 7,
        'categoryRanking': 1,
        'applicationStart': "2024-09-01",
        'applicationEnd': "2024-10-15",
        'interviewDate': "Rolling basis",
        'description': "The gold standard for bilingual international education in Asia.",
        'website': "https://www.cis.edu.hk/",
        'interviewRequirements': "Native-level bilingualism and problem-solving.",
        'interviewTips': "Parents' commitment to bilingualism is as important as the child's.",
    },
    {
        'id': 'isf',
        'name': "The ISF Academy",
        'nameZh': "弘立書院",
        'location': "1 Kong Sin Wan Road, Pok Fu Lam",
        'district': "Southern (南區)",
        'tuitionFee': "HK$211,000 / yr",
        'curriculum': [Curriculum.IB],
        'language': ["Putonghua", "English"],
        'type': SchoolType.PRIVATE,
        'ranking': 8,
        'categoryRanking': 2,
        'applicationStart': "2024-08-01",
        'applicationEnd': "2025-01-10",
        'interviewDate': "September - February",
        'description': "Private independent school emphasizing Chinese culture and global outlook.",
        'website': "https://academy.isf.edu.hk/",
        'interviewRequirements': "Bilingual ability and cultural curiosity.",
        'interviewTips': "Uses an experiential interview style; be prepared for interactive play.",
    },
    {
        'id': 'harrow',
        'name': "Harrow International School Hong Kong",
        'nameZh': "哈羅香港國際學校",
        'location': "38 Tsing Ying Road, Tuen Mun",
        'district': "Tuen Mun (屯門區)",
        'tuitionFee': "HK$185,000 / yr",
        'curriculum': [Curriculum.BRITISH],
        'language': ["English"],
        'type': SchoolType.INTERNATIONAL,
        'ranking': 9,
        'categoryRanking': 1,
        'applicationStart': "2024-09-01",
        'applicationEnd': "2024-11-01",
        'interviewDate': "November - January",
        'description': "British boarding school tradition in a modern HK setting.",
        'website': "https://www.harrowschool.hk/",
        'interviewRequirements': "English literacy, social skills, and leadership potential.",
        'interviewTips': "Expect group activities and basic individual verbal assessments.",
    },
    {
        'id': 'hkis',
        'name': "Hong Kong International School",
        'nameZh': "香港國際學校",
        'location': "700 Tai Tam Reservoir Road",
        'district': "Southern (南區)",
        'tuitionFee': "HK$235,000 / yr",
        'curriculum': [Curriculum.AP],
        'language': ["English"],
        'type': SchoolType.INTERNATIONAL,
        'ranking': 10,
        'categoryRanking': 1,
        'applicationStart': "2024-09-01",
        'applicationEnd': "2024-10-31",
        'interviewDate': "Winter",
        'description': "American curriculum school with a strong focus on community and faith.",
        'website': "https://www.hkis.edu.hk/",
        'interviewRequirements': "Creative expression and social-emotional readiness.",
        'interviewTips': "Priority is given to US citizens and siblings.",
    },
]


# =============================================================================
# GENERATED ENTRIES (ranks 11-100)
# =============================================================================

_DISTRICTS = [
    "Kowloon City", "Wan Chai", "Central & Western", "Southern", "Sha Tin",
    "Yau Tsim Mong", "Eastern", "Kwun Tong", "Sham Shui Po", "Tsuen Wan",
    "Tuen Mun", "Yuen Long", "North", "Tai Po", "Sai Kung", "Kwai Tsing",
]

_TYPES = [SchoolType.AIDED, SchoolType.DSS, SchoolType.PRIVATE, SchoolType.INTERNATIONAL]

_CURRICULA = [Curriculum.DSE, Curriculum.IB, Curriculum.AP, Curriculum.BRITISH]

_NAMES = [
    ("Ying Wa Primary School", "英華小學"),
    ("St. Paul's College Primary School", "聖保羅書院小學"),
    ("St. Stephen's College Prep School", "聖士提反書院附屬小學"),
    ("Good Hope Primary School", "德望小學暨幼稚園"),
    ("Heep Yunn Primary School", "協恩中學附屬小學"),
    ("True Light Middle School (Primary)", "香港真光中學（小學部）"),
    ("Shatin Tsung Tsin School", "沙田崇真學校"),
    ("SKH St. James' Primary School", "聖公會聖雅各小學"),
    ("North Point Government Primary", "北角官立小學"),
    ("Raimondi College Primary", "高主教書院小學部"),
    ("St. Francis of Assisi's English Primary", "聖方济各英文小學"),
    ("Pui Kiu College", "培僑書院"),
    ("Evangel College", "播道書院"),
    ("Stewards Pooi Kei Primary", "培基小學"),
    ("VSA - Victoria Shanghai Academy", "滬江維多利亞學校"),
    ("G.T. (Ellen Yeung) College", "優才（楊殷有娣）書院"),
    ("Logos Academy", "香港浸會大學附屬學校王錦輝中小學"),
    ("PLK Choi Kai Yau School", "保良局蔡繼有學校"),
    ("Munsang College Primary", "民生書院小學"),
    ("Holy Family Canossian School", "聖家學校"),
    ("Renaissance College", "啟新書院"),
    ("Discovery College", "智新書院"),
    ("St. Hilary's Primary", "聖希拿里小學"),
    ("Marymount Primary School", "瑪利曼小學"),
    ("Hennessy Road Gov Primary", "軒尼詩道官立小學"),
    ("Shatin Methodist Primary", "沙田循道衛理小學"),
    ("HKUGA Primary School", "香港大學畢業同學會小學"),
    ("Fukien Secondary Affiliated", "福建中學附屬學校"),
    ("St. Margaret's Co-educational", "聖瑪加利男女英文中小學"),
    ("Kowloon Tong School", "九龍塘學校（小學部）"),
    ("Think International School", "朗思國際學校"),
    ("Singapore International School", "新加坡國際學校"),
    ("Australian International School", "香港澳洲國際學校"),
    ("Canadian International School", "香港加拿大國際學校"),
    ("German Swiss International", "德瑞國際學校"),
    ("French International School", "香港法國國際學校"),
    ("Kellett School", "啟歷學校"),
    ("St. Johannes College", "聖若望英文書院"),
    ("Tak Sun School", "德信學校"),
    ("Yaumati Catholic Primary", "油麻地天主教小學"),
    ("Rosaryhill School", "玫瑰崗學校"),
    ("St. Catherine's School", "聖嘉勒小學"),
    ("Kowloon True Light Primary", "九龍真光中學（小學部）"),
    ("Ma On Shan Ling Liang Primary", "馬鞍山靈糧小學"),
    ("Buddhist Chi King Primary", "佛教慈敬學校"),
    ("Tsuen Wan Catholic Primary", "荃灣天主教小學"),
]

GENERATED_COUNT = 90


def _generated_record(i: int) -> dict:
    rank = i + 11
    name, name_zh = _NAMES[i % len(_NAMES)]
    district = _DISTRICTS[i % len(_DISTRICTS)]
    school_type = _TYPES[i % len(_TYPES)]

    # Deadlines scattered through Oct-Dec 2024
    month = 10 + i // 40
    day = i % 28 + 1

    if school_type == SchoolType.AIDED:
        tuition = "Aided (Free)"
    else:
        tuition = f"HK${30000 + i * 800} / yr"

    return {
        'id': f"school-{rank}",
        'name': f"{name} ({rank})",
        'nameZh': f"{name_zh} ({rank})",
        'location': f"{(i * 37) % 500 + 1} School Lane, {district}",
        'district': f"{district} ({district}區)",
        'tuitionFee': tuition,
        'curriculum': [_CURRICULA[i % len(_CURRICULA)]],
        'language': ["English", "Cantonese"],
        'type': school_type,
        'ranking': rank,
        'categoryRanking': rank // 4 + 1,
        'applicationStart': "2024-09-01",
        'applicationEnd': f"2024-{month:02d}-{day:02d}",
        'interviewDate': "October - January",
        'description': "A highly respected institution fostering academic and personal growth.",
        'website': "https://www.example.edu.hk",
        'interviewRequirements': "Interaction, curiosity, and language proficiency.",
        'interviewTips': "Encourage your child to be expressive and observant.",
    }


def load_base_schools() -> List[School]:
    """Return the 100 built-in schools in catalog order."""
    records = _FEATURED + [_generated_record(i) for i in range(GENERATED_COUNT)]
    return [School.from_dict(record) for record in records]
