"""
Bundled "standard" FIGlet font.

The font text is kept as a module constant so that load_standard_font()
works without locating data files on disk.
"""

from typing import Final

STANDARD_FONT: Final[str] = r"""flf2a$ 6 5 16 15 11 0 24463 229
Standard by Glenn Chappell & Ian Chai 3/93 -- based on Frank's .sig
Includes ISO Latin-1
figlet release 2.1 -- 12 Aug 1994
Modified for figlet 2.2 by John Cowan <cowan@ccil.org>
  to add Latin-{2,3,4,5} support (Unicode U+0100-017F).
Permission is hereby given to modify this font, as long as the
modifier's name is placed on a comment line.

Modified by Paul Burton <solution@earthlink.net> 12/96 to include new parameter
supported by FIGlet and FIGWin.  May also be slightly modified for better use
of new full-width/kern/smush alternatives, but default output is NOT changed.
 $@
 $@
 $@
 $@
 $@
 $@@
  _ @
 | |@
 | |@
 |_|@
 (_)@
    @@
  _ _ @
 ( | )@
  V V @
   $  @
   $  @
      @@
    _  _   @
  _| || |_ @
 |_  ..  _|@
 |_      _|@
   |_||_|  @
           @@
   _  @
  | | @
 / __)@
 \__ \@
 (   /@
  |_| @@
  _  __@
 (_)/ /@
   / / @
  / /_ @
 /_/(_)@
       @@
   ___   @
  ( _ )  @
  / _ \/\@
 | (_>  <@
  \___/\/@
         @@
  _ @
 ( )@
 |/ @
  $ @
  $ @
    @@
   __@
  / /@
 | | @
 | | @
 | | @
  \_\@@
 __  @
 \ \ @
  | |@
  | |@
  | |@
 /_/ @@
       @
 __/\__@
 \    /@
 /_  _\@
   \/  @
       @@
        @
    _   @
  _| |_ @
 |_   _|@
   |_|  @
        @@
    @
    @
    @
  _ @
 ( )@
 |/ @@
        @
        @
  _____ @
 |_____|@
     $  @
        @@
    @
    @
    @
  _ @
 (_)@
    @@
     __@
    / /@
   / / @
  / /  @
 /_/   @
       @@
   ___  @
  / _ \ @
 | | | |@
 | |_| |@
  \___/ @
        @@
  _ @
 / |@
 | |@
 | |@
 |_|@
    @@
  ____  @
 |___ \ @
   __) |@
  / __/ @
 |_____|@
        @@
  _____ @
 |___ / @
   |_ \ @
  ___) |@
 |____/ @
        @@
  _  _   @
 | || |  @
 | || |_ @
 |__   _|@
    |_|  @
         @@
  ____  @
 | ___| @
 |___ \ @
  ___) |@
 |____/ @
        @@
   __   @
  / /_  @
 | '_ \ @
 | (_) |@
  \___/ @
        @@
  _____ @
 |___  |@
    / / @
   / /  @
  /_/   @
        @@
   ___  @
  ( _ ) @
  / _ \ @
 | (_) |@
  \___/ @
        @@
   ___  @
  / _ \ @
 | (_) |@
  \__, |@
    /_/ @
        @@
    @
  _ @
 (_)@
  _ @
 (_)@
    @@
    @
  _ @
 (_)@
  _ @
 ( )@
 |/ @@
   __@
  / /@
 / / @
 \ \ @
  \_\@
     @@
        @
  _____ @
 |_____|@
 |_____|@
     $  @
        @@
 __  @
 \ \ @
  \ \@
  / /@
 /_/ @
     @@
  ___ @
 |__ \@
   / /@
  |_| @
  (_) @
      @@
    ____  @
   / __ \ @
  / / _` |@
 | | (_| |@
  \ \__,_|@
   \____/ @@
     _    @
    / \   @
   / _ \  @
  / ___ \ @
 /_/   \_\@
          @@
  ____  @
 | __ ) @
 |  _ \ @
 | |_) |@
 |____/ @
        @@
   ____ @
  / ___|@
 | |    @
 | |___ @
  \____|@
        @@
  ____  @
 |  _ \ @
 | | | |@
 | |_| |@
 |____/ @
        @@
  _____ @
 | ____|@
 |  _|  @
 | |___ @
 |_____|@
        @@
  _____ @
 |  ___|@
 | |_   @
 |  _|  @
 |_|    @
        @@
   ____ @
  / ___|@
 | |  _ @
 | |_| |@
  \____|@
        @@
  _   _ @
 | | | |@
 | |_| |@
 |  _  |@
 |_| |_|@
        @@
  ___ @
 |_ _|@
  | | @
  | | @
 |___|@
      @@
      _ @
     | |@
  _  | |@
 | |_| |@
  \___/ @
        @@
  _  __@
 | |/ /@
 | ' / @
 | . \ @
 |_|\_\@
       @@
  _     @
 | |    @
 | |    @
 | |___ @
 |_____|@
        @@
  __  __ @
 |  \/  |@
 | |\/| |@
 | |  | |@
 |_|  |_|@
         @@
  _   _ @
 | \ | |@
 |  \| |@
 | |\  |@
 |_| \_|@
        @@
   ___  @
  / _ \ @
 | | | |@
 | |_| |@
  \___/ @
        @@
  ____  @
 |  _ \ @
 | |_) |@
 |  __/ @
 |_|    @
        @@
   ___  @
  / _ \ @
 | | | |@
 | |_| |@
  \__\_\@
        @@
  ____  @
 |  _ \ @
 | |_) |@
 |  _ < @
 |_| \_\@
        @@
  ____  @
 / ___| @
 \___ \ @
  ___) |@
 |____/ @
        @@
  _____ @
 |_   _|@
   | |  @
   | |  @
   |_|  @
        @@
  _   _ @
 | | | |@
 | | | |@
 | |_| |@
  \___/ @
        @@
 __     __@
 \ \   / /@
  \ \ / / @
   \ V /  @
    \_/   @
          @@
 __        __@
 \ \      / /@
  \ \ /\ / / @
   \ V  V /  @
    \_/\_/   @
             @@
 __  __@
 \ \/ /@
  \  / @
  /  \ @
 /_/\_\@
       @@
 __   __@
 \ \ / /@
  \ V / @
   | |  @
   |_|  @
        @@
  _____@
 |__  /@
   / / @
  / /_ @
 /____|@
       @@
  __ @
 | _|@
 | | @
 | | @
 | | @
 |__|@@
 __    @
 \ \   @
  \ \  @
   \ \ @
    \_\@
       @@
  __ @
 |_ |@
  | |@
  | |@
  | |@
 |__|@@
  /\ @
 |/\|@
   $ @
   $ @
   $ @
     @@
        @
        @
        @
        @
  _____ @
 |_____|@@
  _ @
 ( )@
  \|@
  $ @
  $ @
    @@
        @
   __ _ @
  / _` |@
 | (_| |@
  \__,_|@
        @@
  _     @
 | |__  @
 | '_ \ @
 | |_) |@
 |_.__/ @
        @@
       @
   ___ @
  / __|@
 | (__ @
  \___|@
       @@
      _ @
   __| |@
  / _` |@
 | (_| |@
  \__,_|@
        @@
       @
   ___ @
  / _ \@
 |  __/@
  \___|@
       @@
   __ @
  / _|@
 | |_ @
 |  _|@
 |_|  @
      @@
        @
   __ _ @
  / _` |@
 | (_| |@
  \__, |@
  |___/ @@
  _     @
 | |__  @
 | '_ \ @
 | | | |@
 |_| |_|@
        @@
  _ @
 (_)@
 | |@
 | |@
 |_|@
    @@
    _ @
   (_)@
   | |@
   | |@
  _/ |@
 |__/ @@
  _    @
 | | __@
 | |/ /@
 |   < @
 |_|\_\@
       @@
  _ @
 | |@
 | |@
 | |@
 |_|@
    @@
            @
  _ __ ___  @
 | '_ ` _ \ @
 | | | | | |@
 |_| |_| |_|@
            @@
        @
  _ __  @
 | '_ \ @
 | | | |@
 |_| |_|@
        @@
        @
   ___  @
  / _ \ @
 | (_) |@
  \___/ @
        @@
        @
  _ __  @
 | '_ \ @
 | |_) |@
 | .__/ @
 |_|    @@
        @
   __ _ @
  / _` |@
 | (_| |@
  \__, |@
     |_|@@
       @
  _ __ @
 | '__|@
 | |   @
 |_|   @
       @@
      @
  ___ @
 / __|@
 \__ \@
 |___/@
      @@
  _   @
 | |_ @
 | __|@
 | |_ @
  \__|@
      @@
        @
  _   _ @
 | | | |@
 | |_| |@
  \__,_|@
        @@
        @
 __   __@
 \ \ / /@
  \ V / @
   \_/  @
        @@
           @
 __      __@
 \ \ /\ / /@
  \ V  V / @
   \_/\_/  @
           @@
       @
 __  __@
 \ \/ /@
  >  < @
 /_/\_\@
       @@
        @
  _   _ @
 | | | |@
 | |_| |@
  \__, |@
  |___/ @@
      @
  ____@
 |_  /@
  / / @
 /___|@
      @@
    __@
   / /@
  | | @
 < <  @
  | | @
   \_\@@
  _ @
 | |@
 | |@
 | |@
 | |@
 |_|@@
 __   @
 \ \  @
  | | @
   > >@
  | | @
 /_/  @@
  /\/|@
 |/\/ @
   $  @
   $  @
   $  @
      @@
  _   _ @
 (_)_(_)@
   /_\  @
  / _ \ @
 /_/ \_\@
        @@
  _   _ @
 (_)_(_)@
  / _ \ @
 | |_| |@
  \___/ @
        @@
  _   _ @
 (_) (_)@
 | | | |@
 | |_| |@
  \___/ @
        @@
  _   _ @
 (_)_(_)@
  / _` |@
 | (_| |@
  \__,_|@
        @@
  _   _ @
 (_)_(_)@
  / _ \ @
 | (_) |@
  \___/ @
        @@
  _   _ @
 (_) (_)@
 | | | |@
 | |_| |@
  \__,_|@
        @@
   ___ @
  / _ \@
 | |/ /@
 | |\ \@
 | ||_/@
 |_|   @@
160  NO-BREAK SPACE
 $@
 $@
 $@
 $@
 $@
 $@@
161  INVERTED EXCLAMATION MARK
  _ @
 (_)@
 | |@
 | |@
 |_|@
    @@
162  CENT SIGN
    _  @
   | | @
  / __)@
 | (__ @
  \   )@
   |_| @@
163  POUND SIGN
    ___  @
   / ,_\ @
 _| |_   @
  | |___ @
 (_,____|@
         @@
164  CURRENCY SIGN
 /\___/\@
 \  _  /@
 | (_) |@
 / ___ \@
 \/   \/@
        @@
165  YEN SIGN
  __ __ @
  \ V / @
 |__ __|@
 |__ __|@
   |_|  @
        @@
166  BROKEN BAR
  _ @
 | |@
 |_|@
  _ @
 | |@
 |_|@@
167  SECTION SIGN
    __ @
  _/ _)@
 / \ \ @
 \ \\ \@
  \ \_/@
 (__/  @@
168  DIAERESIS
  _   _ @
 (_) (_)@
  $   $ @
  $   $ @
  $   $ @
        @@
169  COPYRIGHT SIGN
    ____   @
   / __ \  @
  / / _| \ @
 | | (__  |@
  \ \__| / @
   \____/  @@
170  FEMININE ORDINAL INDICATOR
  __ _ @
 / _` |@
 \__,_|@
 |____|@
    $  @
       @@
171  LEFT-POINTING DOUBLE ANGLE QUOTATION MARK
   ____@
  / / /@
 / / / @
 \ \ \ @
  \_\_\@
       @@
172  NOT SIGN
        @
  _____ @
 |___  |@
     |_|@
    $   @
        @@
173  SOFT HYPHEN
       @
       @
  ____ @
 |____|@
    $  @
       @@
174  REGISTERED SIGN
    ____   @
   / __ \  @
  / | _ \ \@
 | |   /  |@
  \ |_|\_/ @
   \____/  @@
175  MACRON
  _____ @
 |_____|@
    $   @
    $   @
    $   @
        @@
176  DEGREE SIGN
   __  @
  /  \ @
 | () |@
  \__/ @
    $  @
       @@
177  PLUS-MINUS SIGN
    _   @
  _| |_ @
 |_   _|@
  _|_|_ @
 |_____|@
        @@
178  SUPERSCRIPT TWO
  ___ @
 |_  )@
  / / @
 /___|@
   $  @
      @@
179  SUPERSCRIPT THREE
  ____@
 |__ /@
  |_ \@
 |___/@
   $  @
      @@
180  ACUTE ACCENT
  __@
 /_/@
  $ @
  $ @
  $ @
    @@
181  MICRO SIGN
        @
  _   _ @
 | | | |@
 | |_| |@
 | ._,_|@
 |_|    @@
182  PILCROW SIGN
   _____ @
  /     |@
 | (| | |@
  \__ | |@
    |_|_|@
         @@
183  MIDDLE DOT
    @
  _ @
 (_)@
  $ @
  $ @
    @@
184  CEDILLA
    @
    @
    @
    @
  _ @
 )_)@@
185  SUPERSCRIPT ONE
  _ @
 / |@
 | |@
 |_|@
  $ @
    @@
186  MASCULINE ORDINAL INDICATOR
  ___ @
 / _ \@
 \___/@
 |___|@
   $  @
      @@
187  RIGHT-POINTING DOUBLE ANGLE QUOTATION MARK
 ____  @
 \ \ \ @
  \ \ \@
  / / /@
 /_/_/ @
       @@
188  VULGAR FRACTION ONE QUARTER
  _   __    @
 / | / / _  @
 | |/ / | | @
 |_/ /|_  _|@
  /_/   |_| @
            @@
189  VULGAR FRACTION ONE HALF
  _   __   @
 / | / /__ @
 | |/ /_  )@
 |_/ / / / @
  /_/ /___|@
           @@
190  VULGAR FRACTION THREE QUARTERS
  ____  __    @
 |__ / / / _  @
  |_ \/ / | | @
 |___/ /|_  _|@
    /_/   |_| @
              @@
191  INVERTED QUESTION MARK
   _  @
  (_) @
  | | @
 / /_ @
 \___|@
      @@
192  LATIN CAPITAL LETTER A WITH GRAVE
   __   @
   \_\  @
   /_\  @
  / _ \ @
 /_/ \_\@
        @@
193  LATIN CAPITAL LETTER A WITH ACUTE
    __  @
   /_/  @
   /_\  @
  / _ \ @
 /_/ \_\@
        @@
194  LATIN CAPITAL LETTER A WITH CIRCUMFLEX
   //\  @
  |/_\| @
   /_\  @
  / _ \ @
 /_/ \_\@
        @@
195  LATIN CAPITAL LETTER A WITH TILDE
   /\/| @
  |/\/  @
   /_\  @
  / _ \ @
 /_/ \_\@
        @@
196  LATIN CAPITAL LETTER A WITH DIAERESIS
  _   _ @
 (_)_(_)@
   /_\  @
  / _ \ @
 /_/ \_\@
        @@
197  LATIN CAPITAL LETTER A WITH RING ABOVE
    _   @
   (o)  @
   /_\  @
  / _ \ @
 /_/ \_\@
        @@
198  LATIN CAPITAL LETTER AE
     ______ @
    /  ____|@
   / _  _|  @
  / __ |___ @
 /_/ |_____|@
            @@
199  LATIN CAPITAL LETTER C WITH CEDILLA
   ____ @
  / ___|@
 | |    @
 | |___ @
  \____|@
    )_) @@
200  LATIN CAPITAL LETTER E WITH GRAVE
    __  @
  _\_\_ @
 | ____|@
 |  _|_ @
 |_____|@
        @@
201  LATIN CAPITAL LETTER E WITH ACUTE
     __ @
  _/_/_ @
 | ____|@
 |  _|_ @
 |_____|@
        @@
202  LATIN CAPITAL LETTER E WITH CIRCUMFLEX
   //\  @
  |/_\| @
 | ____|@
 |  _|_ @
 |_____|@
        @@
203  LATIN CAPITAL LETTER E WITH DIAERESIS
  _   _ @
 (_)_(_)@
 | ____|@
 |  _|_ @
 |_____|@
        @@
204  LATIN CAPITAL LETTER I WITH GRAVE
  __  @
  \_\ @
 |_ _|@
  | | @
 |___|@
      @@
205  LATIN CAPITAL LETTER I WITH ACUTE
   __ @
  /_/ @
 |_ _|@
  | | @
 |___|@
      @@
206  LATIN CAPITAL LETTER I WITH CIRCUMFLEX
  //\ @
 |/_\|@
 |_ _|@
  | | @
 |___|@
      @@
207  LATIN CAPITAL LETTER I WITH DIAERESIS
  _   _ @
 (_)_(_)@
  |_ _| @
   | |  @
  |___| @
        @@
208  LATIN CAPITAL LETTER ETH
    ____  @
   |  _ \ @
  _| |_| |@
 |__ __| |@
   |____/ @
          @@
209  LATIN CAPITAL LETTER N WITH TILDE
   /\/| @
  |/\/  @
 | \| | @
 | .` | @
 |_|\_| @
        @@
210  LATIN CAPITAL LETTER O WITH GRAVE
   __   @
   \_\  @
  / _ \ @
 | |_| |@
  \___/ @
        @@
211  LATIN CAPITAL LETTER O WITH ACUTE
    __  @
   /_/  @
  / _ \ @
 | |_| |@
  \___/ @
        @@
212  LATIN CAPITAL LETTER O WITH CIRCUMFLEX
   //\  @
  |/_\| @
  / _ \ @
 | |_| |@
  \___/ @
        @@
213  LATIN CAPITAL LETTER O WITH TILDE
   /\/| @
  |/\/  @
  / _ \ @
 | |_| |@
  \___/ @
        @@
214  LATIN CAPITAL LETTER O WITH DIAERESIS
  _   _ @
 (_)_(_)@
  / _ \ @
 | |_| |@
  \___/ @
        @@
215  MULTIPLICATION SIGN
      @
      @
  /\/\@
  >  <@
  \/\/@
      @@
216  LATIN CAPITAL LETTER O WITH STROKE
   ____ @
  / _// @
 | |// |@
 | //| |@
  //__/ @
        @@
217  LATIN CAPITAL LETTER U WITH GRAVE
   __   @
  _\_\_ @
 | | | |@
 | |_| |@
  \___/ @
        @@
218  LATIN CAPITAL LETTER U WITH ACUTE
    __  @
  _/_/_ @
 | | | |@
 | |_| |@
  \___/ @
        @@
219  LATIN CAPITAL LETTER U WITH CIRCUMFLEX
   //\  @
  |/ \| @
 | | | |@
 | |_| |@
  \___/ @
        @@
220  LATIN CAPITAL LETTER U WITH DIAERESIS
  _   _ @
 (_) (_)@
 | | | |@
 | |_| |@
  \___/ @
        @@
221  LATIN CAPITAL LETTER Y WITH ACUTE
    __  @
 __/_/__@
 \ \ / /@
  \ V / @
   |_|  @
        @@
222  LATIN CAPITAL LETTER THORN
  _     @
 | |___ @
 |  __ \@
 |  ___/@
 |_|    @
        @@
223  LATIN SMALL LETTER SHARP S
   ___ @
  / _ \@
 | |/ /@
 | |\ \@
 | ||_/@
 |_|   @@
224  LATIN SMALL LETTER A WITH GRAVE
   __   @
   \_\_ @
  / _` |@
 | (_| |@
  \__,_|@
        @@
225  LATIN SMALL LETTER A WITH ACUTE
    __  @
   /_/_ @
  / _` |@
 | (_| |@
  \__,_|@
        @@
226  LATIN SMALL LETTER A WITH CIRCUMFLEX
   //\  @
  |/_\| @
  / _` |@
 | (_| |@
  \__,_|@
        @@
227  LATIN SMALL LETTER A WITH TILDE
   /\/| @
  |/\/  @
  / _` |@
 | (_| |@
  \__,_|@
        @@
228  LATIN SMALL LETTER A WITH DIAERESIS
  _   _ @
 (_)_(_)@
  / _` |@
 | (_| |@
  \__,_|@
        @@
229  LATIN SMALL LETTER A WITH RING ABOVE
    __  @
   (()) @
  / _ '|@
 | (_| |@
  \__,_|@
        @@
230  LATIN SMALL LETTER AE
           @
   __ ____ @
  / _`  _ \@
 | (_|  __/@
  \__,____|@
           @@
231  LATIN SMALL LETTER C WITH CEDILLA
       @
   ___ @
  / __|@
 | (__ @
  \___|@
   )_) @@
232  LATIN SMALL LETTER E WITH GRAVE
   __  @
   \_\ @
  / _ \@
 |  __/@
  \___|@
       @@
233  LATIN SMALL LETTER E WITH ACUTE
    __ @
   /_/ @
  / _ \@
 |  __/@
  \___|@
       @@
234  LATIN SMALL LETTER E WITH CIRCUMFLEX
   //\ @
  |/_\|@
  / _ \@
 |  __/@
  \___|@
       @@
235  LATIN SMALL LETTER E WITH DIAERESIS
  _   _ @
 (_)_(_)@
  / _ \ @
 |  __/ @
  \___| @
        @@
236  LATIN SMALL LETTER I WITH GRAVE
 __ @
 \_\@
 | |@
 | |@
 |_|@
    @@
237  LATIN SMALL LETTER I WITH ACUTE
  __@
 /_/@
 | |@
 | |@
 |_|@
    @@
238  LATIN SMALL LETTER I WITH CIRCUMFLEX
  //\ @
 |/_\|@
  | | @
  | | @
  |_| @
      @@
239  LATIN SMALL LETTER I WITH DIAERESIS
  _   _ @
 (_)_(_)@
   | |  @
   | |  @
   |_|  @
        @@
240  LATIN SMALL LETTER ETH
   /\/\ @
   >  < @
  _\/\ |@
 / __` |@
 \____/ @
        @@
241  LATIN SMALL LETTER N WITH TILDE
   /\/| @
  |/\/  @
 | '_ \ @
 | | | |@
 |_| |_|@
        @@
242  LATIN SMALL LETTER O WITH GRAVE
   __   @
   \_\  @
  / _ \ @
 | (_) |@
  \___/ @
        @@
243  LATIN SMALL LETTER O WITH ACUTE
    __  @
   /_/  @
  / _ \ @
 | (_) |@
  \___/ @
        @@
244  LATIN SMALL LETTER O WITH CIRCUMFLEX
   //\  @
  |/_\| @
  / _ \ @
 | (_) |@
  \___/ @
        @@
245  LATIN SMALL LETTER O WITH TILDE
   /\/| @
  |/\/  @
  / _ \ @
 | (_) |@
  \___/ @
        @@
246  LATIN SMALL LETTER O WITH DIAERESIS
  _   _ @
 (_)_(_)@
  / _ \ @
 | (_) |@
  \___/ @
        @@
247  DIVISION SIGN
        @
    _   @
  _(_)_ @
 |_____|@
   (_)  @
        @@
248  LATIN SMALL LETTER O WITH STROKE
         @
   ____  @
  / _//\ @
 | (//) |@
  \//__/ @
         @@
249  LATIN SMALL LETTER U WITH GRAVE
   __   @
  _\_\_ @
 | | | |@
 | |_| |@
  \__,_|@
        @@
250  LATIN SMALL LETTER U WITH ACUTE
    __  @
  _/_/_ @
 | | | |@
 | |_| |@
  \__,_|@
        @@
251  LATIN SMALL LETTER U WITH CIRCUMFLEX
   //\  @
  |/ \| @
 | | | |@
 | |_| |@
  \__,_|@
        @@
252  LATIN SMALL LETTER U WITH DIAERESIS
  _   _ @
 (_) (_)@
 | | | |@
 | |_| |@
  \__,_|@
        @@
253  LATIN SMALL LETTER Y WITH ACUTE
    __  @
  _/_/_ @
 | | | |@
 | |_| |@
  \__, |@
  |___/ @@
254  LATIN SMALL LETTER THORN
  _     @
 | |__  @
 | '_ \ @
 | |_) |@
 | .__/ @
 |_|    @@
255  LATIN SMALL LETTER Y WITH DIAERESIS
  _   _ @
 (_) (_)@
 | | | |@
 | |_| |@
  \__, |@
  |___/ @@
"""
