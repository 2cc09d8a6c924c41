"""Sparse partial-round constants of the BN254 Poseidon permutation, rounds 0 to 18.

Each partial round uses seven constants. The first four form the row that
computes the new first state element. The last three are the factors by which
the first element is added into the remaining elements.
"""

from __future__ import annotations

SPARSE_ROW_LENGTH = 7
FIRST_ROUND = 0

_HEAD = 16023668707004248971294664614290028914393192768609916554276071736843535714477


def _row(*tail: int) -> tuple[int, ...]:
    return (_HEAD, *tail)


ROWS: tuple[tuple[int, ...], ...] = (
    _row(
        20198106103550706280267600199190750325504745188750640438654177959939538483777,
        20760367756622597472566835313508896628444391801225538453375145392828630013190,
        4560321026325826558577463029506577497226940849420215249948019116691014248443,
        14542348742554217629977259301175635295381723358917389768274600005636270665372,
        15896375770890915929312334597144922470201903000282577832977222171710825960733,
        12252597347102015743878803847985560878912969150828000392862427919235870760323,
    ),
    _row(
        7179342059755701265188463641990689102412444920238824560515276276968272417627,
        4291630597779640477035256747339007105528129889017831542003293220100844273045,
        7155591457893668398581213488670279080694237456746471479962759104308162960346,
        18018059843853960571576693455761079306078638316240126846230125992269221919628,
        17192953047291854075450899126062621814148699654417386994738494022353693631044,
        21569358698233938087179836388127293183598397710122666685148766859224500701833,
    ),
    _row(
        767999929530270249383649002937499906068820748885293476546946323828660462871,
        5621566033978712522450054985133362876999740181849707666504220417128301048308,
        7047587043137472855909285569331719962122602952080655968507950635506526200417,
        4106788926932251085789923064963212794107963499320782851030491954062548275037,
        4545465201904739898734767265726940896371623586331600641370124254775978068067,
        10998902844068831181439895790460185435489188976722435541316954293463196661627,
    ),
    _row(
        4376836298206152573581217002448306554373223213053980459591637689821900483336,
        5063873841797552329477290331693185729765297320248590815860571737190009344755,
        17220054068062949177158788546035218460663984286240089601095376499170326046885,
        6096091793679274146365056037005290512891839764898244154356695047489211507312,
        20208154436430351332345105187219062318903703844357504892008088901754085119783,
        20838511199557042422189066592494164230774524176144133560311285338373104325885,
    ),
    _row(
        16227720862704770803579874423899491820268073980006154670796744520986650305964,
        3929921339874032224077598341189960169422821598221170533707987779964278253429,
        11676522033799786037262769984406232796495555956069794755879715792396951198318,
        7762519209385193303450585425818218327021377088446472105589371562364474259645,
        12228816136730871104506419752649367119045148103237539623130531869347941136043,
        5506740114091186508725306313701186842841118936086047703119202768266996591645,
    ),
    _row(
        14813919600103919291484875851986720548476220511386386518354061356196294952105,
        19412665928425989269357649645392922518929142728556361947563991549129986237680,
        7745252322635388376641759428229975035032852732127464661605110457073217385072,
        12066184602104703003390387343585316865507822321930012054206126015745471356816,
        12620273762884289038844321186080149434615909817652953074992148689167338466281,
        11751773042154924867322926561716263630089863992083485679779160826117120630730,
    ),
    _row(
        5787863126296931978637454491180421506307265052288386136386997720537089333357,
        4359270971608384879625804007684881130504862820820494966964908818477035866962,
        19213956561377299828591097862016633994148464565683346498602915228516385038972,
        10661554072824488477243358897537934080796136449622029441506710580786939692047,
        3607791084285905641943446462342879718459787316113396877697968017015606720718,
        21380267103954285713588504655257961830793460465329761560308765483331070823566,
    ),
    _row(
        16335017324810170896233622441986531365208293021101073775522004006769586788569,
        8596452296160802102282257210844234154821630615259613589128211738647312221536,
        16301372420970040998092568156060757300799008373690279794165397142889066306513,
        11903327405072234929619206491534763321300297227799575111355508350177812704304,
        14821948344368180716550312221723948572649473361813001292505502225087596775887,
        5285692778454746827266147532131677990565304365953070750869571432820529495914,
    ),
    _row(
        10012872528823706988605864950067342792516562023507005612462537243496467566252,
        21446538914812609684138720355481253195782233393805940184895189253411195275222,
        6967738095634646257690113616580876555259467406702097184326306034350680240041,
        4106908293164276270299730590107104728631886925545072356564726466348010934176,
        20927688665665429774877287472467937369033546230576320387423016374665584172634,
        9961827048684904093454156105462119035870307939873087416648411282423867596401,
    ),
    _row(
        17625964999746898246984332334222740240090489215775011285534890391099108738991,
        6756403122817134101960922940971569987994537470470008333055210502063290961967,
        18209952059360034384023720860507712662310034604843833483955548867331649086618,
        8749953392298305294875888962184156769810429880914465959429873281709868501522,
        13903906876414887303860424108888965657645488675119946001291096608021846549241,
        8884215530056835002390372161442569149992192407996136723184495322116314590715,
    ),
    _row(
        15368493359884894356742361670810465111377869951487306983186672135817808040059,
        16469301592941427332568429408115015498659452810956369922459344407975076653255,
        11953776125042477689669753843214783238996317490452913722906886945106240528752,
        4850027575321262255650746466350338325012270813222547784484958365303358175196,
        7167191208528939112939986630484202425436947674819310704476597678688297314160,
        14743993805036761996537001252852408745345655735519736268834200732992754437162,
    ),
    _row(
        2193200656642352685118935602989839715339339245164998181015765438900681320425,
        4952431971730605970338760580694476897050208114543185599136664869372496356437,
        11345335340256434787038072013242069397625261572269911025596723263652849081076,
        19160419866562146325212161338497565927215049171520418417356683157217751672139,
        1906154907657701464044944280274832161539842850674948965456024456273947429115,
        16149082223365808325093364716798557120316343643236068373217398223890421952409,
    ),
    _row(
        15043765472887378252850447725400426753906560153686308918666838116627815818554,
        12358170975909062301667468450513761096746838254885629802196667786117625700681,
        8976079215643004959353142348700280485976874920070539486194110584442767827768,
        16076674040958582640238476383964669465698501606063044308184974525408139269248,
        21647594485928619120181355125322770225837180985764869124047447620451714635371,
        21615565593822404396628787247811190031843657706885317097074400292994831686718,
    ),
    _row(
        7285489402319904168831455790041657959272324796876172356990227907987038622155,
        8211470967679835460786450636871651606756811185450731546421075600179331665168,
        13120324752637151731834041425113532499273467426551390593296677993139082244188,
        6490061383110696131545774076292741528427005211177990719476969041145673265422,
        21671644951532628690769713999772810624944081525303128765668379478511313095702,
        17491948871201042934988514071862478178478080786921680019735540941776855947714,
    ),
    _row(
        20875198681143976093301585336441600786893116178926266185909922467347281090330,
        3598136009866557326049002438338730052625336381410025235713569185700458778346,
        10257854050179821094359263633511835293496268374135163743255999829573090463793,
        8709186608235401140998284233255708538357614560705220346211132868280137795418,
        1259589977644258611864841556278758814462356863769029941139050408715640323060,
        4938787097541166466238757186525276546940957932147842294635573194784914432374,
    ),
    _row(
        16717728254520320964463545682641729805489575123710417403982868570393738171908,
        9748879216547249587937312403683718221531596047715540576918379577191876140829,
        14944874834710321794079457580123143945012638912293883509561999360499542827539,
        18031584503513589779232867929321541667009512801047020067337884181460183159789,
        18414164542389736964053830253126595155017280572430646030445262089460883013232,
        2610402018952962996318994974332047870945223376199918653423836750745739531230,
    ),
    _row(
        14009467204580838343058201541088761048498359505808795311724314678689480323211,
        21469776223413224601890303218554639233147301494161934252153679844173746974667,
        20647680658876691843280356403387803136370174824153696476894283712779784940833,
        7936850548423967572066326867280341951424312865893525326890769023431047320991,
        12722969395702657985023075505830677750286440950878333627607092139722193056708,
        11321152935530907374770739017822060871862163756958501641453518139130228537202,
    ),
    _row(
        4094512680835093637766266255807831961532213986166871807693377951477711786051,
        18178389385096689665303225717280896610765865274508135228632006790574677752293,
        5003815887613767774717115773943502417144707145760897577207221259749678760892,
        11395014411676120154590806918236444089801092874462769558428488274754488682814,
        5043626533165824802355651303240938472427342475587368271803664178703751133184,
        20737661798231456194286427103806996346683878567029159134024210934417745289241,
    ),
    _row(
        17885807983183478128547293344015669882824716934567927629992464147210758449961,
        4491530859611985170204284394599169523531547745924230349900720023555385570566,
        10590405810993997824904026910850308084431468206425947323744908163083992870845,
        14773696309507449928652967351151268377421083281901294044684766706170272145134,
        8012817909803347753036095373079065441540540870790316296905616948358031128489,
        15953294845538540694147122390548121234862217402440162841644474763770065752954,
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