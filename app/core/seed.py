"""Catalog data: generals, equipment and campaigns.

Seeding is an upsert by name, so re-running it refreshes stats and skills of
existing rows without touching ids that owned instances point at.
"""

from loguru import logger
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.enums import Country, EquipmentType
from app.models.campaign import Campaign
from app.models.equipment import Equipment
from app.models.general import General

SKILLS: dict[str, tuple[str, str]] = {
    "曹操": ("天下归心", "发动霸道之气，大幅提升全队战力。"),
    "刘备": ("惟贤惟德", "仁德感召，提升全队防御与生存能力。"),
    "孙权": ("坐断东南", "帝王威仪，全队属性均衡提升。"),
    "吕布": ("天下无双", "战神降世，对敌方造成毁灭性打击。"),
    "关羽": ("武圣显灵", "青龙偃月斩，极高概率暴击。"),
    "张飞": ("当阳怒吼", "震慑敌军，降低敌方战力。"),
    "赵云": ("七进七出", "龙胆亮银枪，无视敌方部分防御。"),
    "诸葛亮": ("八阵图", "神机妙算，大幅削弱敌方战力并提升我方智力。"),
    "周瑜": ("火烧赤壁", "业火燎原，造成巨额计策伤害。"),
    "司马懿": ("鹰视狼顾", "深谋远虑，反弹敌方伤害。"),
    "郭嘉": ("遗计", "天妒英才，大幅提升我方计策成功率。"),
    "陆逊": ("火烧连营", "计策连环，持续削弱敌军。"),
    "典韦": ("古之恶来", "舍身护主，极大提升自身防御。"),
    "许褚": ("裸衣", "虎痴狂暴，牺牲防御大幅提升攻击。"),
    "马超": ("神威", "西凉铁骑，冲击敌阵大幅提升攻击。"),
    "黄忠": ("百步穿杨", "老当益壮，必定命中敌方要害。"),
    "孙策": ("小霸王", "江东猛虎，提升全队攻击速度。"),
    "张辽": ("突袭", "威震逍遥津，战斗开始时战力激增。"),
    "甘宁": ("锦帆夜袭", "百骑劫营，高概率先手攻击。"),
    "华雄": ("骁骑", "西凉猛将，提升单体伤害。"),
    "颜良": ("勇冠三军", "河北名将，提升攻击力。"),
    "文丑": ("獬豸狂啸", "河北名将，震慑敌军。"),
    "董卓": ("酒池肉林", "暴虐之气，提升攻击但降低防御。"),
    "貂蝉": ("闭月羞花", "倾国倾城，使敌方大概率混乱。"),
    "姜维": ("继往开来", "继承武侯遗志，攻防一体。"),
    "邓艾": ("偷渡阴平", "奇兵突袭，无视敌方地形优势。"),
    "钟会": ("精练策数", "智谋超群，提升计策伤害。"),
}

# name, stars, strength, intellect, leadership, luck, country, description
GENERALS: tuple[tuple[str, int, int, int, int, int, str, str], ...] = (
    ("曹操", 5, 85, 96, 99, 80, "魏", "乱世枭雄，魏武帝。"),
    ("曹丕", 4, 70, 85, 80, 70, "魏", "魏文帝，虽有才略但气量狭小。"),
    ("曹叡", 4, 65, 88, 85, 75, "魏", "魏明帝，善于权术。"),
    ("曹植", 3, 40, 92, 30, 60, "魏", "才高八斗，七步成诗。"),
    ("曹彰", 4, 90, 40, 75, 65, "魏", "黄须儿，勇猛善战。"),
    ("曹仁", 5, 88, 75, 94, 70, "魏", "天人将军，极其善守。"),
    ("曹洪", 4, 82, 60, 78, 85, "魏", "多次舍命救曹操。"),
    ("曹休", 4, 78, 65, 82, 60, "魏", "千里驹，统领虎豹骑。"),
    ("曹真", 4, 80, 75, 88, 70, "魏", "曾大破羌胡，抵御诸葛亮。"),
    ("夏侯惇", 5, 92, 60, 88, 70, "魏", "拔矢啖睛，魏国元老。"),
    ("夏侯渊", 5, 91, 55, 86, 60, "魏", "神速将军，擅长奔袭。"),
    ("夏侯霸", 4, 85, 60, 75, 50, "魏", "后投蜀汉，随姜维北伐。"),
    ("夏侯尚", 3, 75, 75, 80, 60, "魏", "平定上庸，受曹丕宠信。"),
    ("张辽", 5, 94, 82, 95, 70, "魏", "威震逍遥津，五子良将之首。"),
    ("张郃", 5, 90, 78, 92, 60, "魏", "巧变善战，诸葛亮所忌惮。"),
    ("徐晃", 4, 91, 70, 85, 60, "魏", "治军严整，有周亚夫之风。"),
    ("于禁", 4, 78, 72, 88, 40, "魏", "毅重，可惜晚节不保。"),
    ("乐进", 4, 85, 50, 80, 70, "魏", "骁果，每战先登。"),
    ("李典", 3, 75, 78, 75, 70, "魏", "儒雅长者，深明大义。"),
    ("典韦", 5, 98, 30, 60, 40, "魏", "古之恶来，双戟无敌。"),
    ("许褚", 5, 97, 35, 65, 60, "魏", "虎痴，裸衣战马超。"),
    ("文聘", 4, 82, 65, 85, 70, "魏", "镇守江夏数十年，威震敌国。"),
    ("庞德", 4, 93, 60, 80, 30, "魏", "抬棺决战，宁死不降。"),
    ("臧霸", 3, 80, 60, 75, 70, "魏", "泰山群寇首领，镇守青徐。"),
    ("孙礼", 3, 80, 65, 70, 60, "魏", "刚正不阿，曾搏虎救主。"),
    ("郭淮", 4, 78, 82, 88, 75, "魏", "御蜀屏障，善于谋划。"),
    ("郝昭", 4, 80, 85, 90, 70, "魏", "陈仓坚守，力退诸葛亮。"),
    ("王双", 3, 88, 20, 60, 40, "魏", "身长九尺，使得六十斤大刀。"),
    ("诸葛诞", 3, 70, 75, 80, 40, "魏", "功狗，淮南三叛之一。"),
    ("钟会", 5, 60, 94, 90, 30, "魏", "精练策数，灭蜀主将。"),
    ("邓艾", 5, 85, 92, 93, 50, "魏", "偷渡阴平，灭蜀第一功。"),
    ("陈泰", 4, 75, 86, 85, 70, "魏", "陈群之子，弘雅有智。"),
    ("司马懿", 5, 70, 99, 97, 90, "魏", "鹰视狼顾，三国终结者。"),
    ("司马师", 4, 75, 90, 88, 70, "魏", "沉稳坚毅，平定叛乱。"),
    ("司马昭", 4, 70, 92, 85, 80, "魏", "司马昭之心，路人皆知。"),
    ("羊祜", 5, 65, 90, 92, 85, "魏", "德才兼备，伐吴奠基人。"),
    ("杜预", 4, 50, 88, 90, 80, "魏", "武库，势如破竹。"),
    ("王濬", 4, 75, 80, 85, 70, "魏", "楼船破吴，水军都督。"),
    ("贾逵", 3, 65, 82, 75, 60, "魏", "豫州刺史，据守有功。"),
    ("满宠", 4, 70, 88, 85, 75, "魏", "征东将军，屡抗东吴。"),
    ("田豫", 4, 75, 80, 85, 70, "魏", "威震北疆，讨伐乌丸。"),
    ("牵招", 3, 75, 78, 80, 65, "魏", "北疆名将，与田豫齐名。"),
    ("秦朗", 3, 70, 65, 70, 60, "魏", "曹操养子，低调稳重。"),
    ("夏侯威", 3, 70, 60, 65, 50, "魏", "夏侯渊次子。"),
    ("夏侯惠", 3, 50, 75, 60, 50, "魏", "善属文。"),
    ("曹爽", 3, 60, 50, 60, 20, "魏", "虽身居高位，却无才能。"),
    ("桓范", 3, 40, 85, 50, 30, "魏", "智囊，可惜不被采纳。"),
    ("韩德", 2, 75, 40, 60, 20, "魏", "西凉猛将，被赵云灭门。"),
    ("夏侯楙", 1, 40, 30, 40, 80, "魏", "无能驸马。"),
    ("王凌", 3, 65, 75, 75, 40, "魏", "淮南一叛首领。"),
    ("刘备", 5, 80, 85, 90, 95, "蜀", "汉昭烈帝，仁德之君。"),
    ("刘禅", 2, 20, 30, 40, 90, "蜀", "后主，乐不思蜀。"),
    ("关羽", 5, 98, 75, 95, 60, "蜀", "武圣，过五关斩六将。"),
    ("张飞", 5, 99, 40, 85, 60, "蜀", "万人敌，长坂坡一声吼。"),
    ("赵云", 5, 96, 80, 88, 90, "蜀", "浑身是胆，常胜将军。"),
    ("马超", 5, 97, 50, 88, 50, "蜀", "锦马超，神威天将军。"),
    ("黄忠", 5, 93, 60, 85, 70, "蜀", "老当益壮，定军山斩夏侯渊。"),
    ("诸葛亮", 5, 40, 100, 98, 80, "蜀", "卧龙，千古名相。"),
    ("庞统", 5, 40, 98, 85, 40, "蜀", "凤雏，可惜落凤坡早逝。"),
    ("法正", 4, 40, 96, 80, 60, "蜀", "蜀之谋主，定军山策划者。"),
    ("魏延", 4, 92, 70, 85, 40, "蜀", "作战勇猛，子午谷奇谋。"),
    ("姜维", 5, 90, 90, 92, 50, "蜀", "天水麒麟儿，九伐中原。"),
    ("马岱", 3, 82, 60, 75, 70, "蜀", "斩杀魏延。"),
    ("王平", 4, 80, 75, 88, 70, "蜀", "无当飞军统帅，稳重识大体。"),
    ("李严", 3, 70, 80, 80, 50, "蜀", "托孤大臣，因运粮不力被废。"),
    ("刘封", 3, 85, 50, 70, 30, "蜀", "刘备养子，勇猛刚烈。"),
    ("关平", 4, 85, 65, 78, 60, "蜀", "关羽义子，随父殉难。"),
    ("关兴", 3, 86, 60, 75, 60, "蜀", "继承武圣之风。"),
    ("张苞", 3, 87, 40, 70, 50, "蜀", "张飞之子，勇猛似父。"),
    ("周仓", 3, 85, 30, 60, 60, "蜀", "为关羽扛刀的猛将。"),
    ("廖化", 3, 78, 65, 75, 90, "蜀", "蜀中无大将，廖化作先锋。"),
    ("张翼", 3, 75, 70, 78, 70, "蜀", "亢直，不主张北伐。"),
    ("张嶷", 4, 78, 75, 82, 60, "蜀", "平定南中，无当飞军名将。"),
    ("吴懿", 3, 75, 70, 80, 80, "蜀", "蜀汉外戚，车骑将军。"),
    ("吴班", 3, 72, 60, 75, 60, "蜀", "豪爽，随刘备伐吴。"),
    ("陈到", 4, 85, 60, 82, 70, "蜀", "统领白毦兵，仅次于赵云。"),
    ("霍峻", 4, 70, 75, 85, 70, "蜀", "以数百人坚守葭萌关。"),
    ("霍弋", 3, 70, 75, 80, 70, "蜀", "镇守南中，忠心不二。"),
    ("傅肜", 3, 75, 50, 70, 20, "蜀", "夷陵断后，壮烈战死。"),
    ("傅佥", 3, 80, 60, 75, 30, "蜀", "继承父志，死战不退。"),
    ("冯习", 2, 70, 50, 65, 20, "蜀", "夷陵之战蜀军大都督。"),
    ("张南", 2, 70, 50, 65, 20, "蜀", "夷陵之战先锋。"),
    ("黄权", 4, 60, 85, 80, 60, "蜀", "良谋，被迫降魏。"),
    ("李恢", 3, 65, 80, 75, 70, "蜀", "说降马超，平定南中。"),
    ("马忠", 3, 70, 70, 80, 80, "蜀", "镇守南中，威恩并施。"),
    ("邓芝", 3, 60, 85, 75, 80, "蜀", "出使东吴，不辱使命。"),
    ("向宠", 3, 65, 70, 75, 70, "蜀", "性行淑均，晓畅军事。"),
    ("赵统", 2, 70, 50, 60, 60, "蜀", "赵云长子。"),
    ("赵广", 2, 75, 40, 60, 30, "蜀", "赵云次子，战死沙场。"),
    ("高翔", 2, 65, 50, 65, 50, "蜀", "参与北伐，屯兵列柳城。"),
    ("辅匡", 2, 65, 50, 65, 50, "蜀", "蜀中宿将。"),
    ("刘琰", 2, 40, 60, 40, 40, "蜀", "位高权轻，善于交际。"),
    ("糜竺", 3, 30, 75, 40, 90, "蜀", "雍容大方，倾家助主。"),
    ("糜芳", 2, 60, 40, 50, 20, "蜀", "背叛关羽，投降东吴。"),
    ("士仁", 2, 60, 40, 50, 20, "蜀", "与糜芳一同投降。"),
    ("孟达", 3, 75, 75, 70, 30, "蜀", "反复无常，降魏复叛。"),
    ("严颜", 3, 85, 60, 75, 60, "蜀", "断头将军，老当益壮。"),
    ("罗宪", 4, 75, 80, 88, 70, "蜀", "蜀亡后坚守永安抗吴。"),
    ("诸葛尚", 3, 80, 60, 60, 20, "蜀", "诸葛亮之孙，绵竹战死。"),
    ("孙坚", 5, 94, 75, 93, 40, "吴", "江东猛虎，武烈皇帝。"),
    ("孙策", 5, 95, 70, 96, 40, "吴", "小霸王，平定江东。"),
    ("孙权", 5, 75, 85, 95, 90, "吴", "碧眼儿，善于用人。"),
    ("周瑜", 5, 70, 98, 96, 70, "吴", "美周郎，赤壁一把火。"),
    ("鲁肃", 5, 50, 94, 90, 80, "吴", "榻上策，联刘抗曹。"),
    ("吕蒙", 5, 80, 90, 94, 60, "吴", "白衣渡江，士别三日。"),
    ("陆逊", 5, 65, 97, 98, 80, "吴", "书生拜帅，火烧连营。"),
    ("陆抗", 5, 70, 92, 95, 80, "吴", "东吴最后的长城。"),
    ("张昭", 4, 20, 90, 60, 80, "吴", "内事不决问张昭。"),
    ("程普", 4, 82, 70, 85, 70, "吴", "三代元老，德高望重。"),
    ("黄盖", 4, 83, 65, 80, 70, "吴", "苦肉计，赤壁先锋。"),
    ("韩当", 3, 80, 60, 75, 70, "吴", "擅长骑射，江表虎臣。"),
    ("蒋钦", 3, 82, 65, 78, 60, "吴", "贵守约，性清约。"),
    ("周泰", 4, 90, 40, 70, 80, "吴", "身被十二创，忠勇护主。"),
    ("陈武", 3, 85, 40, 70, 30, "吴", "庐江上甲，合肥战死。"),
    ("董袭", 3, 84, 40, 65, 30, "吴", "讨伐山越，淹死于濡须。"),
    ("甘宁", 5, 94, 60, 88, 50, "吴", "锦帆贼，百骑劫魏营。"),
    ("凌统", 4, 88, 60, 80, 60, "吴", "国士之风，与甘宁和解。"),
    ("徐盛", 4, 85, 75, 86, 70, "吴", "疑兵之计，大破曹丕。"),
    ("潘璋", 3, 80, 60, 75, 70, "吴", "擒获关羽，性奢靡。"),
    ("丁奉", 4, 82, 70, 85, 80, "吴", "雪中奋短兵，东吴后期名将。"),
    ("朱治", 3, 65, 75, 80, 80, "吴", "举荐孙权，元老旧臣。"),
    ("朱然", 4, 75, 75, 88, 80, "吴", "威震敌国，坚守江陵。"),
    ("吕范", 3, 60, 80, 80, 70, "吴", "如亲戚待，后勤总管。"),
    ("太史慈", 5, 93, 65, 85, 40, "吴", "神射手，信义笃烈。"),
    ("贺齐", 3, 80, 70, 85, 70, "吴", "平定山越，喜好华丽。"),
    ("全琮", 3, 75, 70, 80, 70, "吴", "孙权女婿，右大司马。"),
    ("朱桓", 4, 85, 75, 85, 60, "吴", "胆略过人，性格高傲。"),
    ("步骘", 3, 60, 85, 80, 70, "吴", "平定交州，宽弘大度。"),
    ("虞翻", 3, 60, 88, 50, 40, "吴", "狂直，精通易经。"),
    ("诸葛瑾", 3, 60, 85, 80, 80, "吴", "诸葛亮之兄，温厚诚信。"),
    ("诸葛恪", 4, 60, 90, 85, 20, "吴", "才气干略，刚愎自用。"),
    ("顾雍", 3, 30, 88, 70, 80, "吴", "丞相，沉默寡言。"),
    ("张纮", 3, 20, 92, 50, 70, "吴", "二张之一，战略规划。"),
    ("阚泽", 3, 30, 85, 40, 60, "吴", "献诈降书，博学多才。"),
    ("孙桓", 3, 80, 70, 80, 60, "吴", "宗室名将，围困关羽。"),
    ("孙韶", 3, 80, 60, 75, 70, "吴", "镇守边疆，善于侦察。"),
    ("孙静", 2, 60, 70, 60, 80, "吴", "孙坚之弟。"),
    ("孙瑜", 3, 70, 75, 75, 60, "吴", "好学不倦。"),
    ("孙皎", 3, 75, 65, 75, 60, "吴", "轻财好施。"),
    ("吕岱", 3, 70, 75, 85, 90, "吴", "高寿，清忠奉公。"),
    ("周鲂", 3, 50, 85, 70, 70, "吴", "断发诱敌。"),
    ("钟离牧", 3, 65, 70, 75, 60, "吴", "不避矢石，亲自种稻。"),
    ("留赞", 3, 85, 40, 75, 30, "吴", "临战必歌，白发苍苍。"),
    ("唐咨", 2, 70, 50, 65, 50, "吴", "魏降将，善造船。"),
    ("文鸯", 5, 96, 50, 80, 40, "吴", "勇力绝人，单骑退雄兵。"),
    ("祖郎", 2, 75, 30, 60, 50, "吴", "山越首领，归降孙策。"),
    ("孙亮", 1, 20, 60, 30, 20, "吴", "被废之君。"),
    ("孙休", 2, 30, 70, 50, 60, "吴", "除掉权臣孙綝。"),
    ("孙皓", 2, 50, 40, 40, 10, "吴", "暴君，亡国之主。"),
    ("吕布", 5, 100, 30, 85, 20, "群", "人中吕布，马中赤兔。"),
    ("董卓", 4, 85, 70, 90, 10, "群", "西凉军阀，暴虐无道。"),
    ("袁绍", 4, 70, 75, 90, 40, "群", "四世三公，外宽内忌。"),
    ("袁术", 3, 60, 60, 70, 20, "群", "冢中枯骨，僭号称帝。"),
    ("公孙瓒", 4, 85, 60, 85, 30, "群", "白马将军，威震塞外。"),
    ("马腾", 3, 80, 50, 80, 40, "群", "伏波将军之后，西凉军阀。"),
    ("韩遂", 3, 70, 80, 80, 50, "群", "九曲黄河，割据西凉。"),
    ("张鲁", 3, 50, 70, 80, 60, "群", "五斗米道师君，割据汉中。"),
    ("张绣", 3, 80, 60, 75, 50, "群", "北地枪王，宛城战曹操。"),
    ("刘表", 3, 40, 80, 80, 60, "群", "八俊之一，坐谈客。"),
    ("刘璋", 2, 30, 50, 60, 40, "群", "暗弱，引狼入室。"),
    ("陶谦", 2, 30, 70, 60, 50, "群", "三让徐州。"),
    ("孔融", 3, 20, 85, 50, 20, "群", "孔子之后，刚正不阿。"),
    ("王允", 3, 30, 90, 70, 20, "群", "连环计，诛董卓。"),
    ("何进", 2, 40, 30, 70, 10, "群", "屠户大将军，引狼入室。"),
    ("卢植", 4, 70, 90, 92, 50, "群", "海内人望，文武双全。"),
    ("皇甫嵩", 4, 80, 85, 94, 60, "群", "平定黄巾，一代名将。"),
    ("朱儁", 4, 82, 80, 90, 50, "群", "坚守孤城，平定黄巾。"),
    ("丁原", 2, 60, 50, 60, 10, "群", "吕布义父。"),
    ("华雄", 4, 92, 40, 75, 10, "群", "董卓骁将，温酒斩华雄。"),
    ("李傕", 3, 75, 60, 75, 40, "群", "董卓部将，祸乱长安。"),
    ("郭汜", 3, 75, 50, 70, 40, "群", "董卓部将，互相攻杀。"),
    ("樊稠", 2, 70, 30, 60, 20, "群", "董卓部将，被李傕所杀。"),
    ("张济", 2, 65, 50, 65, 30, "群", "董卓部将，战死。"),
    ("牛辅", 2, 60, 40, 50, 10, "群", "董卓女婿，怯懦。"),
    ("颜良", 4, 94, 40, 80, 10, "群", "河北四庭柱，勇冠三军。"),
    ("文丑", 4, 93, 40, 80, 10, "群", "河北四庭柱，战延津。"),
    ("高览", 3, 85, 60, 75, 50, "群", "河北四庭柱，后降曹。"),
    ("淳于琼", 2, 65, 40, 60, 10, "群", "乌巢酒徒。"),
    ("审配", 3, 50, 80, 75, 30, "群", "忠烈之士，死守邺城。"),
    ("麴义", 4, 85, 60, 85, 10, "群", "先登死士，大破白马义从。"),
    ("纪灵", 3, 82, 50, 75, 40, "群", "三尖两刃刀。"),
    ("桥蕤", 2, 60, 50, 60, 20, "群", "袁术大将，战死。"),
    ("张勋", 2, 60, 40, 65, 30, "群", "袁术大将。"),
    ("刘繇", 2, 40, 60, 50, 30, "群", "扬州牧，被孙策击败。"),
    ("严白虎", 2, 65, 30, 50, 20, "群", "东吴德王，山贼出身。"),
    ("笮融", 2, 50, 40, 40, 10, "群", "残酷的佛教徒。"),
    ("蔡瑁", 3, 60, 70, 75, 50, "群", "水军都督，降曹。"),
    ("张允", 2, 55, 60, 70, 50, "群", "蔡瑁之党。"),
    ("黄祖", 3, 65, 60, 70, 40, "群", "射杀孙坚，坚守江夏。"),
    ("庞羲", 2, 50, 60, 60, 50, "群", "刘璋亲家。"),
    ("张任", 4, 85, 70, 85, 20, "群", "落凤坡射死庞统，忠勇不屈。"),
    ("李异", 2, 70, 40, 60, 30, "群", "被赵云击败。"),
    ("刘璝", 2, 65, 50, 65, 30, "群", "刘璋部将。"),
    ("泠苞", 2, 70, 50, 65, 30, "群", "决堤水淹刘备。"),
    ("邓贤", 2, 65, 50, 60, 30, "群", "刘璋部将。"),
    ("公孙度", 3, 60, 70, 80, 60, "群", "辽东王。"),
    ("高顺", 4, 88, 50, 90, 10, "群", "陷阵营统帅，忠贞不二。"),
    ("陈宫", 4, 30, 92, 70, 10, "群", "刚直烈士，吕布谋主。"),
    ("貂蝉", 5, 20, 80, 60, 90, "群", "闭月羞花，连环计。"),
)

# name, type, stat bonus, stars
EQUIPMENTS: tuple[tuple[str, EquipmentType, int, int], ...] = (
    ("青龙偃月刀", EquipmentType.WEAPON, 50, 5),
    ("丈八蛇矛", EquipmentType.WEAPON, 48, 5),
    ("倚天剑", EquipmentType.WEAPON, 45, 5),
    ("青釭剑", EquipmentType.WEAPON, 45, 5),
    ("方天画戟", EquipmentType.WEAPON, 55, 5),
    ("雌雄双股剑", EquipmentType.WEAPON, 40, 5),
    ("古锭刀", EquipmentType.WEAPON, 28, 4),
    ("烂银枪", EquipmentType.WEAPON, 30, 4),
    ("铁脊蛇矛", EquipmentType.WEAPON, 20, 3),
    ("大斧", EquipmentType.WEAPON, 15, 3),
    ("铁剑", EquipmentType.WEAPON, 10, 2),
    ("兽面吞头铠", EquipmentType.ARMOR, 40, 5),
    ("八卦袍", EquipmentType.ARMOR, 35, 5),
    ("明光铠", EquipmentType.ARMOR, 35, 4),
    ("锁子甲", EquipmentType.ARMOR, 20, 3),
    ("皮甲", EquipmentType.ARMOR, 10, 2),
    ("赤兔马", EquipmentType.TREASURE, 40, 5),
    ("的卢", EquipmentType.TREASURE, 35, 4),
    ("绝影", EquipmentType.TREASURE, 30, 4),
    ("爪黄飞电", EquipmentType.TREASURE, 30, 4),
    ("玉玺", EquipmentType.TREASURE, 50, 5),
    ("孟德新书", EquipmentType.TREASURE, 25, 4),
    ("孙子兵法", EquipmentType.TREASURE, 45, 5),
)

# name, required power, gold reward, exp reward
CAMPAIGNS: tuple[tuple[str, int, int, int], ...] = (
    ("黄巾之乱", 100, 100, 50),
    ("虎牢关之战", 500, 300, 150),
    ("官渡之战", 1500, 800, 400),
    ("赤壁之战", 3000, 2000, 1000),
    ("汉中之战", 5000, 4000, 2000),
    ("夷陵之战", 8000, 6000, 3000),
    ("五丈原", 12000, 10000, 5000),
)


def default_skill(strength: int, intellect: int, leadership: int) -> tuple[str, str]:
    """Skill for generals without a signature one, from their best stat."""
    if intellect > strength and intellect > leadership:
        return "奇策", "运用计略打击敌军。"
    if leadership > strength and leadership > intellect:
        return "统军", "指挥部队，稳扎稳打。"
    return "猛击", "奋力一击，造成物理伤害。"


async def seed_generals(db: AsyncSession) -> int:
    existing = {general.name: general for general in (await db.exec(select(General))).all()}
    for name, stars, strength, intellect, leadership, luck, country, description in GENERALS:
        skill_name, skill_desc = SKILLS.get(name) or default_skill(strength, intellect, leadership)
        general = existing.get(name) or General(name=name)
        general.sqlmodel_update(
            {
                "stars": stars,
                "strength": strength,
                "intellect": intellect,
                "leadership": leadership,
                "luck": luck,
                "country": Country(country),
                "description": description,
                "skill_name": skill_name,
                "skill_desc": skill_desc,
            }
        )
        db.add(general)
    return len(GENERALS)


async def seed_equipments(db: AsyncSession) -> int:
    existing = {item.name: item for item in (await db.exec(select(Equipment))).all()}
    for name, equipment_type, stat_bonus, stars in EQUIPMENTS:
        equipment = existing.get(name) or Equipment(name=name)
        equipment.sqlmodel_update({"type": equipment_type, "stat_bonus": stat_bonus, "stars": stars})
        db.add(equipment)
    return len(EQUIPMENTS)


async def seed_campaigns(db: AsyncSession) -> int:
    existing = {campaign.name: campaign for campaign in (await db.exec(select(Campaign))).all()}
    for name, required_power, gold_reward, exp_reward in CAMPAIGNS:
        campaign = existing.get(name) or Campaign(name=name)
        campaign.sqlmodel_update(
            {"required_power": required_power, "gold_reward": gold_reward, "exp_reward": exp_reward}
        )
        db.add(campaign)
    return len(CAMPAIGNS)


async def seed_catalog(db: AsyncSession) -> None:
    generals = await seed_generals(db)
    equipments = await seed_equipments(db)
    campaigns = await seed_campaigns(db)
    await db.commit()
    logger.info(f"Seeded {generals} generals, {equipments} equipments, {campaigns} campaigns")
