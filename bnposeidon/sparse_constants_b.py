"""Sparse partial-round constants of the BN254 Poseidon permutation, rounds 19 to 37.

Each partial round uses seven constants. The first four form the row that
computes the new first state element. The last three are the factors by which
the first element is added into the remaining elements.
"""

from __future__ import annotations

SPARSE_ROW_LENGTH = 7
FIRST_ROUND = 19

_HEAD = 16023668707004248971294664614290028914393192768609916554276071736843535714477


def _row(*tail: int) -> tuple[int, ...]:
    return (_HEAD, *tail)


ROWS: tuple[tuple[int, ...], ...] = (
    _row(
        19330308615634016202275470394593918283291746889176278663184951919223544096896,
        15105179537685942573078046208371583063999793255578601214915887961329652398190,
        21709064542465141520669973714950919003335169451362947708974082912187480247791,
        460683998482756280912187509737431365362650506162063605585420395591986395093,
        8528936230636059063848306774318500923209521695610089597282351580188192653610,
        8893687738651874055934077641258880070065696892648906132887857010931807062812,
    ),
    _row(
        9353521397201520020163669559110959732855095088196767785130221250369398534266,
        16613542657585137487151470980837461302153210762614545024991732555481490683814,
        2204502375207887950205548277458704596225935813112150868324282564135082293291,
        21254675318867619388160936117044327276221059873039333971338260709002243972836,
        16665573707712654499163134682677891418056405526644611110898762937899356502949,
        14267552583056171982269630733147008270458243455399509417719716681547925602990,
    ),
    _row(
        16367942369253394098422648739247412041658904846897825274155468251740735622582,
        3109601755423487827090460933116495844768178403907542635843078881599579349417,
        13070881723095523414228674713428974685755915412664044005891151350338033029052,
        10259475086157775344414603146661739080464638100961174958014154428063344142346,
        14392919515768311705876085292469557682647137722466492884286386263408604670613,
        517834877649467900881483483632287988070398657044896986690867428743067995638,
    ),
    _row(
        19776116368291396730046653100175352607868202157614878715709943043429632352654,
        5905125865653916927083238886025287246947738553282644091380121061742003257962,
        21028910015562338297173802587144293023870505593218986935232089708700866548848,
        13395944831564259671405922878791909538223635993323846275946092882663526594615,
        7995249236543262914206397633444491535498682241246319919218592002459454218505,
        20437702676708041916002540544749140197744801315911882559568865094949905456106,
    ),
    _row(
        18122990859780045886774524690965061785055534365091244948379358057402402367696,
        7828598613589603783167146853068200035787559469554903457639957531866407371355,
        9332650099915404377420203417011695963084742503430897569811042552155208487972,
        10307617695590426797520999316292503894130404130453293663650538793774250723792,
        8835502107624355497501451075768318888448783969087607217992442118675676473235,
        19120067314041132936628146578356142975011085061134316893491148167766430272263,
    ),
    _row(
        14131158550284047904306566770309132813679338145017696511713416041803712831947,
        18278505503803771900469477275449664281120609236542416293497549235136781566441,
        17153958308999151990078644296244213778962356073179462336659818419962234105847,
        16626758607046130451896378742113613353140534310327816824141377148817543345317,
        3253978674468876751813289588828587424582893573659628257653601068985274811195,
        15124684821333452470068683925631859150599113099371600515189799092190905862045,
    ),
    _row(
        17554798861971373266763024346102515996719053781651720018946226608652696029966,
        4673377481212178482442054929782481181148885179378220577674849430151263814812,
        12802184117569856558550257245216015988375556783492060695287038701794605413493,
        9519514614359898302883682133832551410294990399516042521409471023087274168403,
        16836659443451056297630548550595506972721716824013972318987309735084892491057,
        7395214083924359580241425985340483333597901523044123868756997584036793198254,
    ),
    _row(
        14399322858803900772257678181955451734179272552912056546775770413858440530384,
        1909978450171978853529623580362647076357052571231552147289256161279685882392,
        13281885756205124109513999931355079980393369422935519271174043924199138273390,
        164209740719129725777909013206421786172977937257506729867551471718043494039,
        16705691420580567376788433299746618119784690539139871305988345805972046012457,
        5826800399196629549123275187565614318381497389323145097682684583838285855788,
    ),
    _row(
        8745700306539329869259196731866071878870577472742983713396535761464344570296,
        508475125028636547085017721909144447367158867634347790363605834249994548305,
        13308065070657129846765808536411368840800238227915085241160671109842614736069,
        10019712566526881174916627302365233202635409302600998712624311257405295555967,
        14948048658262145603596652021141019702423717894287496732011428902097682702613,
        15039086326216274046991605161343057988750627388067276180888219462568845064229,
    ),
    _row(
        21096491705236217573638753819195066035854753372393176304524423503032224425998,
        20540136431631199250453995588480387143164544354370046506703506396812372935282,
        21186849459525281586750729801174049327027230971997759985511944731378352524720,
        6848121885117228161216817594905430814981258429233967407187604355908721328558,
        13037575047232910005715065472416622419305037510557664085418549453156900385456,
        17833625863119365031315208055152981164942897924758710427636399886811449556740,
    ),
    _row(
        647623368236351122220409431799139859876095524525221664162752495435482065515,
        12974365649211231492520765559798270821958589291536737829547558404742935791527,
        15547534600512764170410743968922508315745715132682752278457116429781298799438,
        20584726236425418677723102941610547182735385166462720350906478152233407640408,
        14300225354615797067692544691787701642123233971394030871903066287215191118747,
        16295678001265781880580526410222599033811623386008655132827551618100838695276,
    ),
    _row(
        20381043379079252254800770843787089884660790822955671220847236480297529336205,
        9108894275082870067933192903079574663897324502580109505768620424181024287163,
        5680820607864330888516377287072858105818590744368374152569440046457757684320,
        11053473350105919249170169199500210854013326531260083017794490958609880379672,
        12769075511883530146865321202033588214490414269703513464106497906236932124198,
        18759973693942567196361351599844723429910867650807109887961315229008339652628,
    ),
    _row(
        16425700741812211675363235647687005029399366301071410733155116166884856887679,
        19869702808216677847758761872487163621387473209265033304520824036210441934818,
        14073988039965881048079447010526118226047246598254103612590470558684258186244,
        886202035735213563046862324816018035210995137716997070920200120700003967134,
        12027565694895224474791802234109034039772984880014776210441706322417559146489,
        11972498202326440163586176809543524758264680802074662372615568024949824595702,
    ),
    _row(
        1348630117144789003644452314839072329750068133934739562703659359268389747985,
        1396107425439796908939750972938223221605778648225762567016308314789520339962,
        6173001858003427802042546706782122098835769939275305980271183297728965316942,
        16943717877001499284920880255048707490719574351604140426529143119277836403129,
        14254637476176032842487152448677962929592936990526843481247886860454775633326,
        20112551263640702643495202387764478482489841288043250651308711396213637765954,
    ),
    _row(
        14580210729080456657697439135745213807214996922877431278225104041221322283144,
        17944065522218783686971981171223808953317623885825040885897493399216933397441,
        21672476111949246523929453701335722206799241314728447223788259504904156987147,
        16427849329831493218262402566840933522542577642557896988530799384419530862522,
        10752733058291453323011452726707429118120906743416692984681703374550581513882,
        1120153114481280927826334009363750761062539786064908406397864613779304433308,
    ),
    _row(
        6657045611436002337943867733574742655960423094099745811786819937865742754593,
        4548688566209049346950516871294343401334051071109430534058854346117866744739,
        12004873649650240122663793814044887628092046288070805572287428956807094282568,
        10376720357183386406622952185756280165877227546938927619561389051210153106592,
        17932525558731721856340352992169746291760530992792261472641282908501604446811,
        17590757077464321402178239743669088074723578712251925458853962272816312109152,
    ),
    _row(
        3209081991282167870383195969354868449640899668458993044016055038297543518657,
        5864786650128394026837230220022650012182783025931675255391916679281913080366,
        12439377586247860055183624555830288546667346442629775929405362799390541279515,
        20249169533694211243074917072193953326307543430194777911574824077740409867889,
        11955292991025510476129504480910338468553857092582960824101774602100105865508,
        21233753658809258463246874948160331522087646774375604829374717282611108497353,
    ),
    _row(
        5299619631018824922731916064083443097684549422797706633258895684420281864108,
        16213823392220550809755333072267867447553466481133861809088541225502993792933,
        21774021022385158712853171484065240472428767308361650780051834129571232443113,
        19519712983460247626783700627305949599146930344376818640048505866722051236075,
        19201631020677948940033345574241839698570728570677190746232685184366085684755,
        16950719963293537936274035069294977251884656006132028465274842882566872316866,
    ),
    _row(
        19155409025424437690664522806909434551970754598652921692474864449826455337216,
        7680332789706498740282955823359712103361665361365018131178757219206780037124,
        21076561076080209150759527181245666654056099483239360146471339739637030537201,
        497501917138640900716963445320097032971939272734057482481699619406679852072,
        219804352410528064548663406794875692377819157777555527292379890517994310898,
        20650062109272119754567889432541551183228545711882667368558930819623066285550,
    ),
)

LAST_ROUND = FIRST_ROUND + len(ROWS) - 1


def sparse_row(round_index: int) -> tuple[int, ...]:
    """Return the seven sparse constants of partial round ``round_index``.

    Only rounds ``FIRST_ROUND`` to ``LAST_ROUND`` are held here; any other
    round raises ``IndexError``.
    """
    if isinstance(round_index, bool) or not isinstance(round_index, int):
        raise TypeError(f"round index must be an integer, got {type(round_index).__name__}")
    if not FIRST_ROUND <= round_index <= LAST_ROUND:
        raise IndexError(
            f"round {round_index} is outside rounds {FIRST_ROUND}..{LAST_ROUND}"
        )
    return ROWS[round_index - FIRST_ROUND]