"""Sparse partial-round constants of the BN254 Poseidon permutation, rounds 38 to 55.

Each partial round uses seven constants. The first four form the row that
computes the new first state element. The last three are the factors by which
the first element is added into the remaining elements.
"""

from __future__ import annotations

SPARSE_ROW_LENGTH = 7
FIRST_ROUND = 38

_HEAD = 16023668707004248971294664614290028914393192768609916554276071736843535714477


def _row(*tail: int) -> tuple[int, ...]:
    return (_HEAD, *tail)


ROWS: tuple[tuple[int, ...], ...] = (
    _row(
        11946781549111733342374437686417901919881339755720725189559112628795817706603,
        2484460820642436269798549252737235980435448156526237726927772714161779556117,
        9131896045016416748829978568219748930005109068654516264093181558753767987250,
        17539690836656056361902215257263592451628414553660709391600001441653830206065,
        18680327085533119384849399232368527875194911756927197995064579410845089235626,
        3733704884118300721043768874060062456481930803626613247865795986430463043840,
    ),
    _row(
        10869324612517034722196547288387911568763853980957190569709459262556333259802,
        13541129633400691168270375425224652251629428845905913714872674429516061703834,
        19566585716231282658157065399746041623123586124594568018338142400023247847175,
        11129427786234676461186088751699468257665219195861018218716326589482169235738,
        12587809912397784737743829505557561200040529463438352967575388905004140998345,
        19808473521007223175388701036440740142351657866781216113100022591252318502799,
    ),
    _row(
        5873853271511157388891218086625116841039294307138994311967890057520246823262,
        13003486326245606952057355171036271201855738149044785151305974666902939676968,
        317822617317373237216981618014479686465697065761329030109475447686164721451,
        10813741057848680550002438472132336318708520104631920434881565279665858338767,
        1407947600055243217568670010193019554033099296398850283939346444151815545565,
        10748165363652029592490593406190797442361550791106744394554436667603982640562,
    ),
    _row(
        3799831132390157900444549796610450353874750090914089848349537541361771448668,
        1236474870532132985977600728058617189131963342170879994970972386547660462416,
        12129114991304316197801712028291571747667685822200300686411158807713612068935,
        12452782504819389866332384374641397209636135503933026692197899235338769218420,
        17177375615846222421363183777625422826542711334348976790999247784204226247153,
        14724993254182752446999797852163908134432351958415665363281656992462126774682,
    ),
    _row(
        5334385037080506459192079464304402035717161708938461991741391759156701759962,
        5839603057106324284245920895643629522252067410986057849259994788753287208289,
        14326608902192980988016963288619186073396385273801977982209424374836032185437,
        3833013442414862082598619907743002206819313202476167703686360031484342083849,
        5782627886836397242604493658841762433123584410931373681442076300374639175204,
        19713051315944380534324352563108780835417447391745041989823306798607010582122,
    ),
    _row(
        18432899792379962331910523191119990280606783016109716227581834102469679493864,
        10114179315138932736747722408239325460537042542506605453447755151962569740761,
        5821210875734924302116104693653963583724566141160222647210211530317113743846,
        7272434816631750120284299385293876240257916908609412315349255596053274406936,
        4212296281436173015983236952207520516627835095278776445938770899997037368424,
        6955140567497387214231321978484207887660637811874868846921238176118501620416,
    ),
    _row(
        16897957031536287824842741409118604269531477953952068130977839056875990315078,
        13928891481908488754724298520914059676632551457225054691072093686516662594704,
        18609207589312797911981956932131451830029990404869237009695385065926468947990,
        5536380863513150280191401661180648941427892275212253324640352848339521760494,
        5599225957062546984064803248700291456577900100660883438352062938121375670876,
        12727467597196655197125834858597394259624613129696376281662301390743901689826,
    ),
    _row(
        19163832296523160821274196616772872907137958231822436470531902352232904941115,
        10312950311908120735753698174433012744274520178660214256070764297181492311529,
        20378282857854630279466471430783739929226973027333858163427244408490964366943,
        10377180064239448654317729091272064413356995963412409612959212677629982453181,
        2933414924716564156600257176308187931324021696634706744075039747567264729208,
        8493086687568016258498608482327521077256426060613869678446606139457160557731,
    ),
    _row(
        19381450024835411599145851239904096365633900646004460102189421850759351066697,
        11953019744947469552190875928518181787128546459454153390773097887154577772396,
        13376491371023193271031127665379748375688991534278974638471913598784726444357,
        7542871725069391080270213343389444722683777408103033554143042828340526643887,
        9502363618190826927264503377951186073033660324604374823531489866751694300021,
        8942475100033900568271185100922618012810524607209352225513012701802010622336,
    ),
    _row(
        21672484879307704998081070986668301291593477229230485880081317733634466423656,
        12560411374852110641761658167591216057124945743772728716943960683160724056822,
        3722997355103511782752507300407310792223403249171458092438045493962181025019,
        14433522510308019912373989177241241296955315520711007204668297246004835289367,
        21074332145955362315628041254977693445345960799533333435986322886475303250112,
        11688037814420019994761430124416432916208455640936309232737398596294520128684,
    ),
    _row(
        8413591227751150541157599965184931267423827079669402000298235589329872211968,
        17650123658569960265162949890832225475263279247059954604797491790529432356321,
        7032368326020336746840339437615845824739080336621780283569419873917360702928,
        7385147306527643945794759599270778258162448657029306136967713046400437047254,
        9164511581583407790134635624183479582650863721435788581639986518157210097971,
        21232697956642675538653913718380508229639927919821094050264990131998515480363,
    ),
    _row(
        18766563503966172098056598342132389632908065386663557822565991028183540018003,
        19588227650050881742478712753831458567447756852853785637599026881217455808917,
        1397562335684000327360763239099474090628194083907387149001776134346855210172,
        10198846647447159506242448434572704392281982267842998844531477628631237977793,
        4082126476185956308289516001173247963427942564076732012191115788827109604670,
        1259882007354573001457197686554861546488356012943826286439775962762529569759,
    ),
    _row(
        7716815769035341534093079824074304698185682494514188549310576878173077130022,
        2044076383384167496824768664485547753134864604656664348421025061131743608977,
        7774223140652128981941948651155326068745393941932597512012824767919719875428,
        6679985805196174386295848216686508579276442390463151307353623646770660788584,
        6774793209384233535964197412993868564894958211307656732015443437790617825766,
        17867078843395024616403441485600115396944676013587205981831608189485186004136,
    ),
    _row(
        6918083713687670289412597323877415882006094844653186686554461196053948517650,
        14794244995142016109988120927552904368673513765173156992855465350554201454520,
        9469895491505210921132335959822444547950761948532088884408658386318765611458,
        12410499443680346161671381257661336704947211959564338473797332912666796028788,
        7926578664199378339557308917160770386201454695092254922901982085502190339711,
        1074389802911575405482398726791994815320889352331411931514923735327800497648,
    ),
    _row(
        12660721219055881159942064421460786460560697520809352389013840987393603997135,
        4257759001257681685309102971805195284424999843809187868418076529498991787195,
        8970798405382398224814171740357247330369162836256360293947332566119181156885,
        17958544420119383745643163073564878224834088412686597346123856987725643531187,
        17738189036503307406862818984242172707709553320980438963253190315183389070671,
        14287766641051399433873731520879849723607926081596701974021064214044740995654,
    ),
    _row(
        21558827418411379216994978187086694912014548431326761389965315489378942066021,
        7136882485367499209618511242521887384194879969153189708025876500490677483273,
        17220467566610801825959292161481147144970669500227722755203417787632930011521,
        15644351871844947578414272909094033689340289967910075614127700893758848906931,
        21741724266010931381264164854372691714176988715532516896804407315923532276434,
        2419785684404332928492315984637322970326738862445167379156610994774664059995,
    ),
    _row(
        10339805366850086548361875185109456315271528882904249869004576409152632926693,
        19066576437237017989921605377017982206044010175904765960860923934443601514592,
        13822379132369217064164395859669265238386142106084498781870935216496751999075,
        21216485273531618687167053274106121432450196094331038082541464436433083018343,
        1540326880060266517508750499666125605454874001382251434794459985013783734049,
        10979571635040509905158742852019305039752888804051338348133671756054719250675,
    ),
    _row(
        17817950236968355275450565661453279500832679749582869473068209804712565393928,
        4057227004326267443894866444790295439173752231112985308059870347643133047427,
        9481547255077304194865834384522710415757401332737060279379100936057225542025,
        19204974983793400699898444372535256207646557857575315905278218870961389967884,
        14672613178263529785795301930884172260797190868602674472542654261498546023746,
        21407770160218607278833379114951608489910182969042472165261557405353704846967,
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