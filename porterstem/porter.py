"""
Porter Stemmer

This is the Porter stemming algorithm as presented in

Porter, M. "An algorithm for suffix stripping." Program 14.3 (1980): 130-137.

It reproduces the reference vocabulary and output published alongside
the algorithm at

    https://tartarus.org/martin/PorterStemmer/

word for word, which means it keeps the two changes that reference
output was generated with.  Both are marked --DEPARTURE-- below:

   'bli' -> 'ble' is used in Step 2 in place of the published
   'abli' -> 'able', so that e.g. 'possibli' conflates with 'possible'.

   'logi' -> 'log' was added to Step 2, so that short stems like 'geo'
   and 'theo' behave like 'archaeo' and 'philo'.

Words of one or two letters are returned without going through the
steps at all.

No irregular forms table and no other extensions are applied; the
algorithm's well known mistakes (e.g. its treatment of the second 'y'
in 'sayyid') are part of the reference output and are kept.
"""

__docformat__ = 'plaintext'

from porterstem.api import StemmerI


def _lowercase(word):
    """Lowercases `word` one character at a time, never changing its length"""
    # Each character is mapped on its own, so there is no final sigma rule;
    # one that lowercases to several code points (e.g. U+0130) keeps the first
    return ''.join(_lowercase_char(c) for c in word)


def _lowercase_char(c):
    lowered = c.lower()
    return lowered if len(lowered) == 1 else lowered[0]


class PorterStemmer(StemmerI):
    """
    A word stemmer based on the Porter stemming algorithm.

        Porter, M. \"An algorithm for suffix stripping.\"
        Program 14.3 (1980): 130-137.

    The stemmer holds no state between calls, so one instance can be
    shared freely, including between threads.

    The Porter Stemmer requires that all tokens have string types.
    """

    def __init__(self):
        self.vowels = frozenset(['a', 'e', 'i', 'o', 'u'])

    def _cons(self, word, i):
        """cons(i) is TRUE <=> word[i] is a consonant.

        'y' is a consonant at the start of a word, and otherwise is a
        consonant exactly when the letter before it is not.  So 'y' is a
        consonant in 'toy' and 'yes' but a vowel in 'syzygy'.
        """
        if not 0 <= i < len(word):
            raise IndexError(
                "index %d out of range for word of length %d" % (i, len(word))
            )
        # Walk back over a run of 'y's; each one flips the answer.
        flipped = False
        while word[i] == 'y' and i > 0:
            i -= 1
            flipped = not flipped
        return (word[i] not in self.vowels) != flipped

    def _measure(self, stem):
        """Returns the 'measure' of stem, per definition in the paper

        From the paper:

            A consonant will be denoted by c, a vowel by v. A list
            ccc... of length greater than 0 will be denoted by C, and a
            list vvv... of length greater than 0 will be denoted by V.
            Any word, or part of a word, therefore has the form

                [C](VC){m}[V].

            m will be called the measure of any word or word part when
            represented in this form. The case m = 0 covers the null
            word. Here are some examples:

                m=0    TR,  EE,  TREE,  Y,  BY.
                m=1    TROUBLE,  OATS,  TREES,  IVY.
                m=2    TROUBLES,  PRIVATE,  OATEN,  ORRERY.
        """
        # e.g. 'falafel' becomes 'cvcvcvc', 'architecture' 'vcccvcvccvcv'
        cv_sequence = ''.join(
            'c' if self._cons(stem, i) else 'v'
            for i in range(len(stem))
        )

        # Every 'vc' is the end of a vowel run followed by the start of a
        # consonant run, i.e. one VC in the form above
        return cv_sequence.count('vc')

    def _has_positive_measure(self, stem):
        return self._measure(stem) > 0

    def _has_measure_above_one(self, stem):
        return self._measure(stem) > 1

    def _contains_vowel(self, stem):
        """_contains_vowel(stem) is TRUE <=> stem contains a vowel"""
        for i in range(len(stem)):
            if not self._cons(stem, i):
                return True
        return False

    def _has_suffix(self, word, suffix):
        """True if `suffix` is a proper suffix of `word`

        The suffix must be strictly shorter than the word, so a word never
        counts as a suffix of itself: 'er' does not end with 'er' here.
        """
        return len(word) > len(suffix) and word.endswith(suffix)

    def _ends_double_consonant(self, word):
        """Implements condition *d from the paper

        *d  - the stem ends with a double consonant (e.g. -TT, -SS).
        """
        return (
            len(word) >= 2 and
            word[-1] == word[-2] and
            self._cons(word, len(word) - 1)
        )

    def _ends_cvc(self, word):
        """True if word ends consonant-vowel-consonant"""
        return (
            len(word) >= 3 and
            self._cons(word, len(word) - 3) and
            not self._cons(word, len(word) - 2) and
            self._cons(word, len(word) - 1)
        )

    def _ends_cvc_not_wxy(self, word):
        """Implements condition *o from the paper

        From the paper:

            *o  - the stem ends cvc, where the second c is not W, X or Y
                  (e.g. -WIL, -HOP).
        """
        return self._ends_cvc(word) and word[-1] not in ('w', 'x', 'y')

    def _apply_first_possible_rule(self, word, rules):
        """Applies the first suffix rule whose suffix the word ends with

        Takes a word and a list of rules represented as 3-tuples: the
        suffix to remove, the string to replace it with, and the
        condition the remaining stem must meet, or None if the rule is
        unconditional.

        Only the first rule whose suffix matches is considered.  If its
        condition fails the word comes back unchanged; the rules after it
        are not tried.
        """
        for suffix, replacement, condition in rules:
            if self._has_suffix(word, suffix):
                stem = word[:-len(suffix)]
                if condition is None or condition(stem):
                    return stem + replacement
                return word

        return word

    def _step1a(self, word):
        """Implements Step 1a from "An algorithm for suffix stripping"

        From the paper:

            SSES -> SS                         caresses  ->  caress
            IES  -> I                          ponies    ->  poni
                                               ties      ->  ti
            SS   -> SS                         caress    ->  caress
            S    ->                            cats      ->  cat
        """
        return self._apply_first_possible_rule(word, [
            ('sses', 'ss', None),
            ('ies', 'i', None),
            ('ss', 'ss', None),
            ('s', '', None),
        ])

    def _step1b(self, word):
        """Implements Step 1b from "An algorithm for suffix stripping"

        From the paper:

            (m>0) EED -> EE                    feed      ->  feed
                                               agreed    ->  agree
            (*v*) ED  ->                       plastered ->  plaster
                                               bled      ->  bled
            (*v*) ING ->                       motoring  ->  motor
                                               sing      ->  sing

        If the second or third of the rules in Step 1b is successful, the
        following is done:

            AT -> ATE                       conflat(ed)  ->  conflate
            BL -> BLE                       troubl(ed)   ->  trouble
            IZ -> IZE                       siz(ed)      ->  size
            (*d and not (*L or *S or *Z))
               -> single letter
                                            hopp(ing)    ->  hop
                                            tann(ed)     ->  tan
                                            fall(ing)    ->  fall
                                            hiss(ing)    ->  hiss
                                            fizz(ed)     ->  fizz
            (m=1 and *o) -> E               fail(ing)    ->  fail
                                            fil(ing)     ->  file

        The -E is put back on -AT, -BL and -IZ so that the suffixes -ATE,
        -BLE and -IZE can be recognised later.
        """
        if self._has_suffix(word, 'eed'):
            if self._has_positive_measure(word[:-3]):
                return word[:-1]
            return word

        for suffix in ('ed', 'ing'):
            if self._has_suffix(word, suffix):
                stem = word[:-len(suffix)]
                break
        else:
            return word

        if not self._contains_vowel(stem):
            return word

        if (
            self._has_suffix(stem, 'at') or
            self._has_suffix(stem, 'bl') or
            self._has_suffix(stem, 'iz')
        ):
            return stem + 'e'

        if (
            stem[-1] not in ('l', 's', 'z') and
            self._ends_double_consonant(stem)
        ):
            return stem[:-1]

        if self._measure(stem) == 1 and self._ends_cvc_not_wxy(stem):
            return stem + 'e'

        return stem

    def _step1c(self, word):
        """Implements Step 1c from "An algorithm for suffix stripping"

        From the paper:

            (*v*) Y -> I                    happy        ->  happi
                                            sky          ->  sky

        An upper case 'Y' becomes 'I', for callers stemming words whose
        case they have left alone.
        """
        if (
            len(word) >= 2 and
            word[-1] in ('y', 'Y') and
            self._contains_vowel(word[:-1])
        ):
            return word[:-1] + ('i' if word[-1] == 'y' else 'I')
        return word

    def _step2(self, word):
        """Implements Step 2 from "An algorithm for suffix stripping"

        From the paper:

            (m>0) ATIONAL ->  ATE       relational     ->  relate
            (m>0) TIONAL  ->  TION      conditional    ->  condition
                                        rational       ->  rational
            (m>0) ENCI    ->  ENCE      valenci        ->  valence
            (m>0) ANCI    ->  ANCE      hesitanci      ->  hesitance
            (m>0) IZER    ->  IZE       digitizer      ->  digitize
            (m>0) ABLI    ->  ABLE      conformabli    ->  conformable
            (m>0) ALLI    ->  AL        radicalli      ->  radical
            (m>0) ENTLI   ->  ENT       differentli    ->  different
            (m>0) ELI     ->  E         vileli         ->  vile
            (m>0) OUSLI   ->  OUS       analogousli    ->  analogous
            (m>0) IZATION ->  IZE       vietnamization ->  vietnamize
            (m>0) ATION   ->  ATE       predication    ->  predicate
            (m>0) ATOR    ->  ATE       operator       ->  operate
            (m>0) ALISM   ->  AL        feudalism      ->  feudal
            (m>0) IVENESS ->  IVE       decisiveness   ->  decisive
            (m>0) FULNESS ->  FUL       hopefulness    ->  hopeful
            (m>0) OUSNESS ->  OUS       callousness    ->  callous
            (m>0) ALITI   ->  AL        formaliti      ->  formal
            (m>0) IVITI   ->  IVE       sensitiviti    ->  sensitive
            (m>0) BILITI  ->  BLE       sensibiliti    ->  sensible
        """
        return self._apply_first_possible_rule(word, [
            ('ational', 'ate', self._has_positive_measure),
            ('tional', 'tion', self._has_positive_measure),
            ('enci', 'ence', self._has_positive_measure),
            ('anci', 'ance', self._has_positive_measure),
            ('izer', 'ize', self._has_positive_measure),

            # --DEPARTURE--
            # The published algorithm has 'abli' -> 'able' here
            ('bli', 'ble', self._has_positive_measure),

            ('alli', 'al', self._has_positive_measure),
            ('entli', 'ent', self._has_positive_measure),
            ('eli', 'e', self._has_positive_measure),
            ('ousli', 'ous', self._has_positive_measure),
            ('ization', 'ize', self._has_positive_measure),
            ('ation', 'ate', self._has_positive_measure),
            ('ator', 'ate', self._has_positive_measure),
            ('alism', 'al', self._has_positive_measure),
            ('iveness', 'ive', self._has_positive_measure),
            ('fulness', 'ful', self._has_positive_measure),
            ('ousness', 'ous', self._has_positive_measure),
            ('aliti', 'al', self._has_positive_measure),
            ('iviti', 'ive', self._has_positive_measure),
            ('biliti', 'ble', self._has_positive_measure),

            # --DEPARTURE--
            # Not in the published algorithm
            ('logi', 'log', self._has_positive_measure),
        ])

    def _step3(self, word):
        """Implements Step 3 from "An algorithm for suffix stripping"

        From the paper:

            (m>0) ICATE ->  IC              triplicate     ->  triplic
            (m>0) ATIVE ->                  formative      ->  form
            (m>0) ALIZE ->  AL              formalize      ->  formal
            (m>0) ICITI ->  IC              electriciti    ->  electric
            (m>0) ICAL  ->  IC              electrical     ->  electric
            (m>0) FUL   ->                  hopeful        ->  hope
            (m>0) NESS  ->                  goodness       ->  good
        """
        return self._apply_first_possible_rule(word, [
            ('icate', 'ic', self._has_positive_measure),
            ('ative', '', self._has_positive_measure),
            ('alize', 'al', self._has_positive_measure),
            ('iciti', 'ic', self._has_positive_measure),
            ('ical', 'ic', self._has_positive_measure),
            ('ful', '', self._has_positive_measure),
            ('ness', '', self._has_positive_measure),
        ])

    def _step4(self, word):
        """Implements Step 4 from "An algorithm for suffix stripping"

        Every suffix is removed outright once the stem left behind has
        m>1, e.g. revival -> reviv, allowance -> allow, adoption -> adopt.
        -ION also needs the stem to end in S or T.
        """
        measure_gt_1 = self._has_measure_above_one

        return self._apply_first_possible_rule(word, [
            ('al', '', measure_gt_1),
            ('ance', '', measure_gt_1),
            ('ence', '', measure_gt_1),
            ('er', '', measure_gt_1),
            ('ic', '', measure_gt_1),
            ('able', '', measure_gt_1),
            ('ible', '', measure_gt_1),
            ('ant', '', measure_gt_1),
            ('ement', '', measure_gt_1),
            ('ment', '', measure_gt_1),
            ('ent', '', measure_gt_1),

            # (m>1 and (*S or *T)) ION ->
            (
                'ion',
                '',
                lambda stem: measure_gt_1(stem) and stem[-1] in ('s', 't')
            ),

            ('ou', '', measure_gt_1),
            ('ism', '', measure_gt_1),
            ('ate', '', measure_gt_1),
            ('iti', '', measure_gt_1),
            ('ous', '', measure_gt_1),
            ('ive', '', measure_gt_1),
            ('ize', '', measure_gt_1),
        ])

    def _step5a(self, word):
        """Implements Step 5a from "An algorithm for suffix stripping"

        From the paper:

            (m>1) E     ->                  probate        ->  probat
                                            rate           ->  rate
            (m=1 and not *o) E ->           cease          ->  ceas
        """
        if not word.endswith('e'):
            return word

        stem = word[:-1]
        measure = self._measure(stem)
        if measure > 1:
            return stem
        if measure == 1 and not self._ends_cvc_not_wxy(stem):
            return stem
        return word

    def _step5b(self, word):
        """Implements Step 5b from "An algorithm for suffix stripping"

        From the paper:

            (m > 1 and *d and *L) -> single letter
                                    controll       ->  control
                                    roll           ->  roll
        """
        # i.e. (m > 1) LL -> L, with m taken over the word less its last 'l'
        if self._has_suffix(word, 'll') and self._has_measure_above_one(word[:-1]):
            return word[:-1]
        return word

    def stem(self, word):
        """Lowercases `word` and returns its stem as a new string"""
        if not word:
            return word

        return self.stem_without_lowercasing(_lowercase(word))

    def stem_without_lowercasing(self, word):
        """Returns the stem of `word`, leaving its case as it is

        The rules only recognise lower case suffixes, so this is meant
        for callers who have already folded case themselves.
        """
        if len(word) <= 2:
            return word # --DEPARTURE--
        # With this line, strings of length 1 or 2 don't go through the
        # stemming process, although no mention is made of this in the
        # published algorithm.

        stem = self._step1a(word)
        stem = self._step1b(stem)
        stem = self._step1c(stem)
        stem = self._step2(stem)
        stem = self._step3(stem)
        stem = self._step4(stem)
        stem = self._step5a(stem)
        stem = self._step5b(stem)

        return stem

    def stem_in_place(self, chars):
        """Stems a caller-owned list of single characters in place

        Unlike stem(), which never touches its argument, this lowercases
        `chars` and then replaces its contents with the stem, so every
        other reference to the same list sees the result.  Returns None.
        """
        if not chars:
            return

        chars[:] = _lowercase(''.join(chars))
        chars[:] = self.stem_without_lowercasing(''.join(chars))

    def stem_string(self, text):
        """Stems `text`, given as str or UTF-8 bytes, returning a new str

        Bytes that are not valid UTF-8 become U+FFFD rather than raising.
        """
        if isinstance(text, (bytes, bytearray)):
            text = text.decode('utf-8', 'replace')
        return self.stem(str(text))

    def __repr__(self):
        return '<PorterStemmer>'


_stemmer = PorterStemmer()


def stem(word):
    """Lowercases `word` and returns its Porter stem."""
    return _stemmer.stem(word)


def stem_without_lowercasing(word):
    """Returns the Porter stem of `word` without changing its case."""
    return _stemmer.stem_without_lowercasing(word)


def stem_string(text):
    """Returns the Porter stem of `text` (str or UTF-8 bytes) as a str."""
    return _stemmer.stem_string(text)
